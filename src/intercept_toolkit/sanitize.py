"""Escaping helpers for text embedded in dashboard markup."""

from __future__ import annotations

import html
from typing import Any

# Order matters: "&" first so later entities are not escaped twice.
_ATTR_REPLACEMENTS = (
    ("&", "&amp;"),
    ("'", "&#39;"),
    ('"', "&quot;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_html(text: Any) -> str:
    """Escape text for use as element content (quotes are left alone)."""
    if text is None:
        return ""
    return html.escape(str(text), quote=False)


def escape_attr(text: Any) -> str:
    """Escape text for a quoted attribute value, including inline handlers."""
    if text is None:
        return ""
    s = str(text)
    for raw, entity in _ATTR_REPLACEMENTS:
        s = s.replace(raw, entity)
    return s
