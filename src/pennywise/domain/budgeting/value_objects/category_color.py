"""Category display colors and the preset category palette."""

import re
from dataclasses import dataclass

from pennywise.domain.budgeting.exceptions import InvalidColorError

DEFAULT_CATEGORY_COLOR = "#6366f1"

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

# Colors handed out to custom (non-preset) categories, in order
CUSTOM_CATEGORY_COLORS: tuple[str, ...] = (
    "#6366f1",
    "#8b5cf6",
    "#d946ef",
    "#f59e0b",
    "#06b6d4",
    "#10b981",
)


@dataclass(frozen=True)
class CategoryPreset:
    """A suggested category offered during onboarding."""

    name: str
    color: str


PRESET_CATEGORIES: tuple[CategoryPreset, ...] = (
    CategoryPreset("Rent/Mortgage", "#3b82f6"),
    CategoryPreset("Groceries", "#10b981"),
    CategoryPreset("Transportation", "#f59e0b"),
    CategoryPreset("Utilities", "#8b5cf6"),
    CategoryPreset("Internet", "#06b6d4"),
    CategoryPreset("Phone", "#84cc16"),
    CategoryPreset("Insurance", "#f97316"),
    CategoryPreset("Entertainment", "#ec4899"),
    CategoryPreset("Dining Out", "#ef4444"),
    CategoryPreset("Healthcare", "#14b8a6"),
    CategoryPreset("Clothing", "#a855f7"),
    CategoryPreset("Savings", "#22c55e"),
)


def normalize_color(color: str | None) -> str:
    """Validate a ``#rrggbb`` token and return it lower-cased.

    ``None`` or blank input yields the default category color.
    """
    if color is None or not color.strip():
        return DEFAULT_CATEGORY_COLOR

    value = color.strip()
    if not _HEX_COLOR.match(value):
        raise InvalidColorError(color)
    return value.lower()


def find_preset(name: str) -> CategoryPreset | None:
    normalized = name.strip().casefold()
    for preset in PRESET_CATEGORIES:
        if preset.name.casefold() == normalized:
            return preset
    return None


def custom_color(index: int) -> str:
    """Pick the palette color for the ``index``-th custom category."""
    return CUSTOM_CATEGORY_COLORS[index % len(CUSTOM_CATEGORY_COLORS)]
