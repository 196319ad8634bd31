"""Protocol classification and inline SVG icons for signal tables.

Icons are minimal SVGs using standard symbols so they stay legible in
screenshots. Every icon is a ``<span>`` carrying an accessibility label.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from intercept_toolkit.sanitize import escape_attr


class Category(str, Enum):
    WIFI = "wifi"
    BLUETOOTH = "bluetooth"
    CELLULAR = "cellular"
    UNKNOWN = "unknown"


# Checked in order, first match wins.
PROTOCOL_RULES: list[tuple[tuple[str, ...], Category]] = [
    (("wifi", "802.11"), Category.WIFI),
    (("bluetooth", "bt", "ble"), Category.BLUETOOTH),
    (("cellular", "lte", "gsm", "5g"), Category.CELLULAR),
]

_ICON_TEMPLATES: dict[str, tuple[str, str, str]] = {
    # name: (css suffix, aria label, svg body)
    "wifi": ("wifi", "WiFi", """<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
        <path d="M5 12.55a11 11 0 0 1 14.08 0"/>
        <path d="M1.42 9a16 16 0 0 1 21.16 0"/>
        <path d="M8.53 16.11a6 6 0 0 1 6.95 0"/>
        <circle cx="12" cy="20" r="1" fill="currentColor" stroke="none"/>
    </svg>"""),
    "bluetooth": ("bluetooth", "Bluetooth", """<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
        <polyline points="6.5 6.5 17.5 17.5 12 22 12 2 17.5 6.5 6.5 17.5"/>
    </svg>"""),
    "cellular": ("cellular", "Cellular", """<svg viewBox="0 0 24 24" fill="currentColor">
        <rect x="2" y="16" width="4" height="6" rx="1"/>
        <rect x="8" y="12" width="4" height="10" rx="1"/>
        <rect x="14" y="8" width="4" height="14" rx="1"/>
        <rect x="20" y="4" width="4" height="18" rx="1" opacity="0.3"/>
    </svg>"""),
    "signal_unknown": ("signal-unknown", "Unknown signal", """<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round">
        <path d="M2 12c0-3 2-6 5-6s4 3 5 6c1 3 2 6 5 6s5-3 5-6"/>
    </svg>"""),
    "recording": ("recording", "Recording", """<svg viewBox="0 0 24 24" fill="currentColor">
        <circle cx="12" cy="12" r="8"/>
    </svg>"""),
    # Amber by default via CSS.
    "anomaly": ("anomaly", "Anomaly", """<svg viewBox="0 0 24 24" fill="currentColor">
        <circle cx="12" cy="12" r="6"/>
    </svg>"""),
    "export": ("export", "Export", """<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
        <path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/>
        <polyline points="17 8 12 3 7 8"/>
        <line x1="12" y1="3" x2="12" y2="15"/>
    </svg>"""),
    "refresh": ("refresh", "Refresh", """<svg viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
        <polyline points="23 4 23 10 17 10"/>
        <polyline points="1 20 1 14 7 14"/>
        <path d="M3.51 9a9 9 0 0 1 14.85-3.36L23 10M1 14l4.64 4.36A9 9 0 0 0 20.49 15"/>
    </svg>"""),
}

ICON_NAMES = tuple(_ICON_TEMPLATES)

_CATEGORY_ICONS = {
    Category.WIFI: "wifi",
    Category.BLUETOOTH: "bluetooth",
    Category.CELLULAR: "cellular",
    Category.UNKNOWN: "signal_unknown",
}


def classify_protocol(label: Optional[str]) -> Category:
    """Map a free-form protocol label to a Category by keyword containment."""
    text = (label or "").lower()
    for keywords, category in PROTOCOL_RULES:
        if any(keyword in text for keyword in keywords):
            return category
    return Category.UNKNOWN


def icon(name: str, class_name: Optional[str] = None) -> str:
    """Render the named icon. Raises KeyError for names not in ICON_NAMES."""
    css, label, svg = _ICON_TEMPLATES[name]
    return (
        f'<span class="icon icon-{css} {escape_attr(class_name or "")}" aria-label="{label}">\n'
        f"    {svg}\n"
        f"</span>"
    )


def icon_for_category(category: Category, class_name: Optional[str] = None) -> str:
    return icon(_CATEGORY_ICONS[category], class_name)


def icon_for_signal_type(label: Optional[str], class_name: Optional[str] = None) -> str:
    return icon_for_category(classify_protocol(label), class_name)
