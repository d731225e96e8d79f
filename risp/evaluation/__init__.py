from risp.evaluation.evaluator import evaluate
from risp.evaluation.apply import apply, expand, expand_1

__all__ = ["evaluate", "apply", "expand", "expand_1"]
