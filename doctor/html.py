"""
doctor/html.py - Minimal HTML fragment builder

Builds compact, escaped markup for embedding in a larger Doctor page.

Usage:
    html = HtmlBuilder()
    with html.element("div"):
        with html.element("p"):
            html.text("Diagnostics:")
    html.render()  # '<div><p>Diagnostics:</p></div>'
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional
import html as html_lib


class HtmlBuilder:
    """Accumulates HTML parts with balanced open/close tags."""

    def __init__(self):
        self._parts: List[str] = []
        self._open: List[str] = []

    @contextmanager
    def element(
        self,
        tag: str,
        attrs: Optional[Dict[str, str]] = None,
    ) -> Iterator["HtmlBuilder"]:
        """Open ``tag``, yield for children, then close it."""
        self.open(tag, attrs)
        try:
            yield self
        finally:
            self.close(tag)

    def open(self, tag: str, attrs: Optional[Dict[str, str]] = None) -> "HtmlBuilder":
        attr_str = ""
        if attrs:
            attr_str = "".join(
                f' {name}="{html_lib.escape(str(value), quote=True)}"'
                for name, value in attrs.items()
            )
        self._parts.append(f"<{tag}{attr_str}>")
        self._open.append(tag)
        return self

    def close(self, tag: str) -> "HtmlBuilder":
        if not self._open or self._open[-1] != tag:
            current = self._open[-1] if self._open else None
            raise RuntimeError(f"Cannot close <{tag}>, innermost open element is <{current}>")
        self._open.pop()
        self._parts.append(f"</{tag}>")
        return self

    def text(self, value: str) -> "HtmlBuilder":
        """Append escaped text."""
        self._parts.append(html_lib.escape(value))
        return self

    def raw(self, value: str) -> "HtmlBuilder":
        """Append markup verbatim."""
        self._parts.append(value)
        return self

    def render(self) -> str:
        if self._open:
            raise RuntimeError(f"Unclosed elements: {self._open}")
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.render()
