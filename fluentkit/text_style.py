"""Named font presets of the Fluent type ramp."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache


class FontWeight(IntEnum):
    """Font weight on the usual 100-900 scale."""

    NORMAL = 400
    DEMI_BOLD = 600


@dataclass(frozen=True)
class Font:
    """A font described by pixel size and weight."""

    pixel_size: int
    weight: FontWeight = FontWeight.NORMAL


@dataclass(frozen=True)
class TextStyle:
    """The set of named text styles."""

    caption: Font = field(default_factory=lambda: Font(12))
    body: Font = field(default_factory=lambda: Font(13))
    body_strong: Font = field(default_factory=lambda: Font(13, FontWeight.DEMI_BOLD))
    subtitle: Font = field(default_factory=lambda: Font(20, FontWeight.DEMI_BOLD))
    title: Font = field(default_factory=lambda: Font(28, FontWeight.DEMI_BOLD))
    title_large: Font = field(default_factory=lambda: Font(40, FontWeight.DEMI_BOLD))
    display: Font = field(default_factory=lambda: Font(68, FontWeight.DEMI_BOLD))


@lru_cache(maxsize=None)
def text_style() -> TextStyle:
    """Return the shared text style set."""
    return TextStyle()