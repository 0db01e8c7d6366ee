from lispy.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
