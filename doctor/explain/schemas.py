"""
doctor/explain/schemas.py - Explanation payload model

The single structure both the HTML and JSON renderers consume.
"""

from __future__ import annotations
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ExplanationPayload(BaseModel):
    """Title plus the messages shown under it, correct message first."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Section title, e.g. 'Diagnostics:'")
    explanations: List[str] = Field(
        ...,
        min_length=1,
        max_length=2,
        description="Correct message, followed by the incorrect one when shown",
    )

    @property
    def shows_incorrect(self) -> bool:
        return len(self.explanations) == 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "explanations": list(self.explanations),
        }
