"""
explain/ - Build target capability explanations

Renders the "what does this column mean" block of the Doctor for each
capability, as an HTML fragment or a JSON object.
"""

from .schemas import ExplanationPayload

from .formatters import (
    assemble_explanation,
    explanation_html,
    explanation_json,
    to_json_string,
)

from .checks import (
    DoctorExplanation,
    ALL_EXPLANATIONS,
    explain_all_json,
    explain_all_html,
)

__all__ = [
    # Schemas
    "ExplanationPayload",
    # Formatters
    "assemble_explanation",
    "explanation_html",
    "explanation_json",
    "to_json_string",
    # Checks
    "DoctorExplanation",
    "ALL_EXPLANATIONS",
    "explain_all_json",
    "explain_all_html",
]
