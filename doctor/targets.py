"""
doctor/targets.py - Per-target status records

A TargetStatusReport is produced once per Doctor run by whatever collects
build target information. Explanations only read it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .icons import Icons


@dataclass(frozen=True)
class DoctorStatus:
    """Status of one capability dimension for one target."""

    icon: str = ""
    is_correct: bool = True
    explanation: Optional[str] = None

    @classmethod
    def correct(cls, explanation: Optional[str] = None) -> "DoctorStatus":
        return cls(icon=Icons.UNICODE.check, is_correct=True, explanation=explanation)

    @classmethod
    def alert(cls, explanation: Optional[str] = None) -> "DoctorStatus":
        return cls(icon=Icons.UNICODE.alert, is_correct=False, explanation=explanation)

    @classmethod
    def error(cls, explanation: Optional[str] = None) -> "DoctorStatus":
        return cls(icon=Icons.UNICODE.error, is_correct=False, explanation=explanation)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icon": self.icon,
            "isCorrect": self.is_correct,
            "explanation": self.explanation,
        }


def _status(flag: bool) -> DoctorStatus:
    return DoctorStatus.correct() if flag else DoctorStatus.error()


@dataclass(frozen=True)
class TargetStatusReport:
    """Capability status of a single build target."""

    name: str = ""
    target_type: str = ""
    data_kind: Optional[str] = None

    diagnostics_status: DoctorStatus = field(default_factory=DoctorStatus.correct)
    interactive_status: DoctorStatus = field(default_factory=DoctorStatus.correct)
    indexes_status: DoctorStatus = field(default_factory=DoctorStatus.correct)
    debugging_status: DoctorStatus = field(default_factory=DoctorStatus.correct)
    java_status: DoctorStatus = field(default_factory=DoctorStatus.correct)

    recommended_fix: Optional[str] = None

    @classmethod
    def from_flags(
        cls,
        name: str,
        *,
        diagnostics: bool = True,
        interactive: bool = True,
        indexes: bool = True,
        debugging: bool = True,
        java: bool = True,
        target_type: str = "",
    ) -> "TargetStatusReport":
        """Build a report from plain correctness booleans."""
        return cls(
            name=name,
            target_type=target_type,
            diagnostics_status=_status(diagnostics),
            interactive_status=_status(interactive),
            indexes_status=_status(indexes),
            debugging_status=_status(debugging),
            java_status=_status(java),
        )

    @property
    def diagnostics_correct(self) -> bool:
        return self.diagnostics_status.is_correct

    @property
    def interactive_correct(self) -> bool:
        return self.interactive_status.is_correct

    @property
    def indexes_correct(self) -> bool:
        return self.indexes_status.is_correct

    @property
    def debugging_correct(self) -> bool:
        return self.debugging_status.is_correct

    @property
    def java_correct(self) -> bool:
        return self.java_status.is_correct

    def to_dict(self) -> Dict[str, Any]:
        return {
            "buildTarget": self.name,
            "targetType": self.target_type,
            "dataKind": self.data_kind,
            "diagnosticsStatus": self.diagnostics_status.to_dict(),
            "interactiveStatus": self.interactive_status.to_dict(),
            "indexesStatus": self.indexes_status.to_dict(),
            "debuggingStatus": self.debugging_status.to_dict(),
            "javaStatus": self.java_status.to_dict(),
            "recommendedFix": self.recommended_fix,
        }


class Dimension(Enum):
    """Capability dimensions tracked per target."""
    DIAGNOSTICS = "diagnostics_status"
    INTERACTIVE = "interactive_status"
    INDEXES = "indexes_status"
    DEBUGGING = "debugging_status"
    JAVA = "java_status"

    def status_of(self, report: TargetStatusReport) -> DoctorStatus:
        return getattr(report, self.value)

    def is_correct(self, report: TargetStatusReport) -> bool:
        return self.status_of(report).is_correct
