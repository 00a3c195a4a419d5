"""Registry of special forms for the Clojette evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Every handler takes (tail, env, evaluate_fn).
"""

from clojette.types.symbol import Symbol
from clojette.evaluation.special_forms.quote_form import quote_form
from clojette.evaluation.special_forms.set_form import set_form
from clojette.evaluation.special_forms.define_form import def_form, defn_form
from clojette.evaluation.special_forms.if_form import if_form
from clojette.evaluation.special_forms.lambda_form import lambda_form
from clojette.evaluation.special_forms.do_form import do_form
from clojette.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("set!"): set_form,
    Symbol("def"): def_form,
    Symbol("defn"): defn_form,
    Symbol("if"): if_form,
    Symbol("fn"): lambda_form,
    Symbol("do"): do_form,
    Symbol("begin"): do_form,
    Symbol("cond"): cond_form,
}
