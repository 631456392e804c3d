"""Registry of special forms for the minischeme evaluator.

Maps keywords to handler functions that implement non-standard evaluation
rules. `install` binds each one as a SpecialForm value in a frame, so the
evaluator finds them through ordinary variable lookup before deciding how
to treat an Application.
"""

from minischeme.types.environment import Environment
from minischeme.types.procedure import SpecialForm
from minischeme.evaluation.special_forms.quote_form import quote_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.logic_forms import and_form, or_form
from minischeme.evaluation.special_forms.begin_form import begin_form
from minischeme.evaluation.special_forms.define_form import define_form
from minischeme.evaluation.special_forms.set_form import set_form
from minischeme.evaluation.special_forms.lambda_form import lambda_form
from minischeme.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from minischeme.evaluation.special_forms.cond_form import cond_form
from minischeme.evaluation.special_forms.do_loop_form import do_loop_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "and": and_form,
    "or": or_form,
    "begin": begin_form,
    "define": define_form,
    "set!": set_form,
    "lambda": lambda_form,
    "let": let_form,
    "let*": let_star_form,
    "letrec": letrec_form,
    "cond": cond_form,
    "do": do_loop_form,
}


def install(env: Environment) -> None:
    env.update({name: SpecialForm(name, handler) for name, handler in SPECIAL_FORMS.items()})
