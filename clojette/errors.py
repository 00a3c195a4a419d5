class ClojetteError(Exception):
    """ Base class for all Clojette errors"""
    pass

class ParseError(ClojetteError):
    """ Raised when source text cannot be read"""

class EvaluationError(ClojetteError):
    """ Base class for errors raised while evaluating a form"""

class UnboundVariable(EvaluationError):
    """ Raised when a symbol is looked up or assigned before it is bound"""

class ArityError(EvaluationError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, given: int, name: str | None = None):
        self.expected = expected
        self.given = given
        self.kind = "too few" if given < expected else "too many"
        target = f" to {name}" if name else ""
        super().__init__(
            f"Given {self.kind} arguments{target}: expected {expected}, got {given}"
        )

class MalformedForm(EvaluationError):
    """ Raised when a special form has the wrong shape"""

class MalformedCond(MalformedForm):
    """ Raised when a cond form cannot be rewritten into nested ifs"""

class NativeError(EvaluationError):
    """ Raised when a primitive procedure fails"""

class InternalError(ClojetteError):
    """ Base class for evaluator dispatch gaps"""

class UnknownExpression(InternalError):
    """ Raised when no evaluation rule matches an expression"""

class UnknownProcedureType(InternalError):
    """ Raised when applying something that is not a procedure"""
