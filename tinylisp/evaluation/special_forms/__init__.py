"""Registry of special forms for the tinylisp evaluator.

Maps head symbol names to handler functions that implement non-standard
evaluation rules. Each handler receives the unevaluated tail of the form, the
current environment, the interpreter session and the evaluator function. The
evaluator consults this table before ordinary procedure application.
"""

from tinylisp import SpecialFormFn
from tinylisp.evaluation.special_forms.import_form import import_form
from tinylisp.evaluation.special_forms.set_form import set_form, setg_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.while_form import while_form
from tinylisp.evaluation.special_forms.defun_form import defun_form
from tinylisp.evaluation.special_forms.eval_form import eval_form
from tinylisp.evaluation.special_forms.typeof_form import typeof_form

SPECIAL_FORMS: dict[str, SpecialFormFn] = {
    "import": import_form,
    "set": set_form,
    "setg": setg_form,
    "if": if_form,
    "while": while_form,
    "defun": defun_form,
    "eval": eval_form,
    "typeof": typeof_form,
}
