"""Registry of special forms for the schemelet evaluator.

Maps Atom names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary primitive application.
Each handler receives the whole form (for error reporting), the unevaluated
operands and the evaluator.
"""

from schemelet.evaluation.special_forms.if_form import if_form
from schemelet.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
}
