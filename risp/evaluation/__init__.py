from risp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
