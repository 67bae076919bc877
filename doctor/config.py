"""
doctor/config.py - Doctor rendering configuration

Built by the caller (usually the Doctor page assembly) and passed down as
plain render arguments.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .icons import IconStyle, Icons, get_icons


@dataclass
class DoctorConfig:
    """Rendering options for Doctor explanations."""

    icon_style: IconStyle = IconStyle.UNICODE
    json_indent: Optional[int] = 2  # None for compact output

    @property
    def icons(self) -> Icons:
        return get_icons(self.icon_style)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icon_style": self.icon_style.value,
            "json_indent": self.json_indent,
        }
