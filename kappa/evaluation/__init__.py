"""Kappa evaluation: the tree-walking evaluator, application and special forms."""

from kappa.evaluation.evaluator import evaluate
from kappa.evaluation.special_forms.if_form import is_true
from kappa.evaluation.apply import apply

__all__ = ["evaluate", "apply", "is_true"]
