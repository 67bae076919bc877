"""
doctor/explain/formatters.py - Render explanation payloads

assemble_explanation() makes the show/hide decision once; the HTML and JSON
renderers below only format what it produced.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
import json

from ..html import HtmlBuilder
from .schemas import ExplanationPayload


def assemble_explanation(
    title: str,
    correct_message: str,
    incorrect_message: str,
    show: bool,
) -> ExplanationPayload:
    """
    Build the payload for one explanation.

    Args:
        title: Section title
        correct_message: Always included, first
        incorrect_message: Included second only when ``show`` is true
        show: Whether any target is non-compliant

    Returns:
        ExplanationPayload with one or two messages
    """
    explanations = [correct_message]
    if show:
        explanations.append(incorrect_message)
    return ExplanationPayload(title=title, explanations=explanations)


def explanation_html(
    payload: ExplanationPayload,
    html: Optional[HtmlBuilder] = None,
) -> HtmlBuilder:
    """Append ``div > (p, ul > li+)`` for the payload and return the builder."""
    if html is None:
        html = HtmlBuilder()

    with html.element("div"):
        with html.element("p"):
            html.text(payload.title)
        with html.element("ul"):
            for message in payload.explanations:
                with html.element("li"):
                    html.text(message)

    return html


def explanation_json(payload: ExplanationPayload) -> Dict[str, Any]:
    """JSON object form: {"title": ..., "explanations": [...]}."""
    return payload.to_dict()


def to_json_string(data: Any, indent: Optional[int] = 2, ensure_ascii: bool = False) -> str:
    """Serialize a rendered explanation (or a list of them)."""
    if isinstance(data, ExplanationPayload):
        data = data.to_dict()
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=ensure_ascii,
        default=str,
    )
