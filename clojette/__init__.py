# Core type aliases for Clojette's data model.
# Numbers are plain int/float and strings plain str; every other value kind
# (symbols, keywords, literals, sequences, procedures) lives in clojette.types.
#
# Naming guidance:
# - SExpression: Use in reader and special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Evaluator function type: passed into special forms and apply
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
