"""
Build Target Doctor - capability explanations

Explains, per IDE capability (diagnostics, interactive features, semanticdb
indexing, debugging, Java support), whether the workspace's build targets
support it, as HTML fragments or JSON objects.
"""

from .icons import IconStyle, Icons, get_icons
from .targets import Dimension, DoctorStatus, TargetStatusReport
from .html import HtmlBuilder
from .config import DoctorConfig
from .explain import (
    ExplanationPayload,
    assemble_explanation,
    explanation_html,
    explanation_json,
    to_json_string,
    DoctorExplanation,
    ALL_EXPLANATIONS,
    explain_all_json,
    explain_all_html,
)

__version__ = "1.0.0"

__all__ = [
    # Icons
    "IconStyle",
    "Icons",
    "get_icons",
    # Targets
    "Dimension",
    "DoctorStatus",
    "TargetStatusReport",
    # HTML
    "HtmlBuilder",
    # Config
    "DoctorConfig",
    # Explanations
    "ExplanationPayload",
    "assemble_explanation",
    "explanation_html",
    "explanation_json",
    "to_json_string",
    "DoctorExplanation",
    "ALL_EXPLANATIONS",
    "explain_all_json",
    "explain_all_html",
]
