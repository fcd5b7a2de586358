"""Registry of special forms for the tinyscheme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so
these five names cannot be rebound as procedures.
"""

from tinyscheme.types.symbol import Symbol
from tinyscheme.evaluation.special_forms.quote_forms import quote_form
from tinyscheme.evaluation.special_forms.lambda_form import lambda_form
from tinyscheme.evaluation.special_forms.define_form import define_form
from tinyscheme.evaluation.special_forms.if_form import if_form
from tinyscheme.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("load"): load_form,
}
