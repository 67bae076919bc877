"""
doctor/explain/checks.py - Doctor explanations for build target capabilities

Each member of DoctorExplanation explains one column of the Doctor's build
target table: what a correct status means, and what the user is missing when
at least one target is not correct.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence
import logging

from ..html import HtmlBuilder
from ..icons import Icons
from ..targets import Dimension, TargetStatusReport
from .formatters import assemble_explanation, explanation_html, explanation_json
from .schemas import ExplanationPayload

logger = logging.getLogger(__name__)


class DoctorExplanation(Enum):
    """
    Closed set of capability explanations.

    Value layout: (dimension, title, correct icon, correct text,
    incorrect icon, incorrect text).
    """

    DIAGNOSTICS = (
        Dimension.DIAGNOSTICS,
        "Diagnostics:",
        "check", "diagnostics correctly being reported by the build server",
        "alert", "only syntactic errors being reported",
    )
    INTERACTIVE = (
        Dimension.INTERACTIVE,
        "Interactive features (completions, hover):",
        "check", "supported Scala version",
        "error", "interactive features are unsupported for Java and older Scala versions",
    )
    SEMANTICDB = (
        Dimension.INDEXES,
        "Semanticdb features (references, renames, go to implementation):",
        "check", "build tool automatically creating needed semanticdb files",
        "error", "semanticdb not being produced",
    )
    DEBUGGING = (
        Dimension.DEBUGGING,
        "Debugging (run/test, breakpoints, evaluation):",
        "check", "users can run or test their code with debugging capabilities",
        "error", "the tool does not support debugging in this target",
    )
    JAVA_SUPPORT = (
        Dimension.JAVA,
        "Java Support:",
        "check", "working non-interactive features (references, rename etc.)",
        "error", "missing semanticdb plugin, might not be added automatically "
                 "by the build server (work for Bloop only)",
    )

    def __init__(
        self,
        dimension: Dimension,
        title: str,
        correct_icon: str,
        correct_text: str,
        incorrect_icon: str,
        incorrect_text: str,
    ):
        self.dimension = dimension
        self.title = title
        self._correct = (correct_icon, correct_text)
        self._incorrect = (incorrect_icon, incorrect_text)

    def correct_message(self, icons: Optional[Icons] = None) -> str:
        """Message explaining what support for this means."""
        icon, text = self._correct
        return f"{(icons or Icons.UNICODE).glyph(icon)} - {text}"

    def incorrect_message(self, icons: Optional[Icons] = None) -> str:
        """Message explaining what is missing when a target is not correct."""
        icon, text = self._incorrect
        return f"{(icons or Icons.UNICODE).glyph(icon)} - {text}"

    def failing_targets(self, reports: Iterable[TargetStatusReport]) -> List[TargetStatusReport]:
        return [r for r in reports if not self.dimension.is_correct(r)]

    def show(self, reports: Iterable[TargetStatusReport]) -> bool:
        """
        Whether the incorrect message must be shown next to the correct one.

        True iff at least one report is not correct for this dimension.
        An empty sequence is compliant.
        """
        reports = list(reports)
        failing = self.failing_targets(reports)
        if failing:
            logger.debug(
                "%s: %d of %d targets not correct: %s",
                self.name,
                len(failing),
                len(reports),
                ", ".join(r.name for r in failing),
            )
        return bool(failing)

    is_non_compliant = show

    def explanation(
        self,
        reports: Iterable[TargetStatusReport],
        icons: Optional[Icons] = None,
    ) -> ExplanationPayload:
        return assemble_explanation(
            self.title,
            self.correct_message(icons),
            self.incorrect_message(icons),
            self.show(reports),
        )

    def to_html(
        self,
        reports: Iterable[TargetStatusReport],
        html: Optional[HtmlBuilder] = None,
        icons: Optional[Icons] = None,
    ) -> HtmlBuilder:
        """Attach this explanation to ``html`` (a new builder if omitted)."""
        return explanation_html(self.explanation(reports, icons), html)

    def render_html(
        self,
        reports: Iterable[TargetStatusReport],
        icons: Optional[Icons] = None,
    ) -> str:
        return self.to_html(reports, icons=icons).render()

    def to_json(
        self,
        reports: Iterable[TargetStatusReport],
        icons: Optional[Icons] = None,
    ) -> Dict[str, Any]:
        return explanation_json(self.explanation(reports, icons))


ALL_EXPLANATIONS = (
    DoctorExplanation.DIAGNOSTICS,
    DoctorExplanation.INTERACTIVE,
    DoctorExplanation.SEMANTICDB,
    DoctorExplanation.DEBUGGING,
    DoctorExplanation.JAVA_SUPPORT,
)


def explain_all_json(
    reports: Iterable[TargetStatusReport],
    icons: Optional[Icons] = None,
    explanations: Sequence[DoctorExplanation] = ALL_EXPLANATIONS,
) -> List[Dict[str, Any]]:
    """Run every explanation over the same reports, JSON form."""
    reports = tuple(reports)
    return [e.to_json(reports, icons) for e in explanations]


def explain_all_html(
    reports: Iterable[TargetStatusReport],
    html: Optional[HtmlBuilder] = None,
    icons: Optional[Icons] = None,
    explanations: Sequence[DoctorExplanation] = ALL_EXPLANATIONS,
) -> HtmlBuilder:
    """Run every explanation over the same reports, appending to one builder."""
    reports = tuple(reports)
    if html is None:
        html = HtmlBuilder()
    for e in explanations:
        e.to_html(reports, html, icons)
    return html
