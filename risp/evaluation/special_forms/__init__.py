"""Registry of special forms for the risp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before looking anything up, so these names
cannot be shadowed by bindings.
"""

from risp.types.symbol import Symbol
from risp.evaluation.special_forms.quote_forms import quote_form
from risp.evaluation.special_forms.if_form import if_form
from risp.evaluation.special_forms.define_form import def_form, set_form
from risp.evaluation.special_forms.lambda_form import fn_form, macro_form
from risp.evaluation.special_forms.progn_form import begin_form
from risp.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("def"): def_form,
    Symbol("fn"): fn_form,
    Symbol("macro"): macro_form,
    Symbol("begin"): begin_form,
    Symbol("let"): let_form,
    Symbol("set"): set_form,
}
