from clojette.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
