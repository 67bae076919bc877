"""
doctor/icons.py - Status glyphs

Glyph sets used as message prefixes in Doctor explanations. Clients that
cannot render unicode emoji get the empty NONE set.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class IconStyle(Enum):
    """Icon set selection."""
    UNICODE = "unicode"
    NONE = "none"


@dataclass(frozen=True)
class Icons:
    """A set of status glyphs."""

    check: str = ""
    alert: str = ""
    error: str = ""

    def glyph(self, kind: str) -> str:
        """Look up a glyph by kind name (check, alert, error)."""
        if kind not in ("check", "alert", "error"):
            raise ValueError(f"Unknown icon kind: {kind}")
        return getattr(self, kind)


Icons.UNICODE = Icons(
    check="✅",
    alert="⚠️",
    error="❌",
)
Icons.NONE = Icons()


_ICON_SETS = {
    IconStyle.UNICODE: Icons.UNICODE,
    IconStyle.NONE: Icons.NONE,
}


def get_icons(style: Union[IconStyle, str] = IconStyle.UNICODE) -> Icons:
    """
    Resolve an icon set.

    Args:
        style: IconStyle or its string value

    Returns:
        Icons instance

    Raises:
        ValueError: Unknown icon style
    """
    if isinstance(style, str):
        try:
            style = IconStyle(style.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown icon style: {style!r}. "
                f"Supported: {[s.value for s in IconStyle]}"
            ) from None

    return _ICON_SETS[style]
