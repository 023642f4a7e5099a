"""Registry of special forms for the risp evaluator.

Maps well-known operator names to handlers that receive their arguments
unevaluated. The evaluator consults this table before ordinary operator
application.
"""

from risp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "if": if_form,
}
