from lispc.evaluation.evaluator import evaluate, evaluate_sexpr

__all__ = ("evaluate", "evaluate_sexpr")
