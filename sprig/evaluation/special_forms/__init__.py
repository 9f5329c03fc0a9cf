"""Registry of special forms for the Sprig evaluator.

Maps keyword Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before treating a list
as a procedure call, so this table is the complete set of special forms.

Every handler has the signature
``(tail, env, ctx, evaluate_fn, form) -> value`` where `tail` is the list of
unevaluated operands and `form` is the whole node, kept for error reports.
"""

from sprig.types.symbol import Symbol
from sprig.evaluation.special_forms.begin_form import begin_form
from sprig.evaluation.special_forms.cond_form import cond_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.logic_forms import and_form, or_form, not_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("not"): not_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
    Symbol("begin"): begin_form,
}
