"""Registry of special forms for the Kappa evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler has the signature

    handler(tail, env, evaluate_fn) -> value

where `tail` is the form's argument chain exactly as read (a Cons chain or Nil),
never pre-evaluated.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.quote_form import quote_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.lambda_form import lambda_form
from kappa.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("defun"): defun_form,
}
