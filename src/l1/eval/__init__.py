"""Evaluators: small-step reduction and the big-step reference."""

from l1.eval.direct import eval_direct
from l1.eval.step import evaluate, reduction_rule, step

__all__ = [
    "step",
    "evaluate",
    "reduction_rule",
    "eval_direct",
]
