"""
Glossing helpers.

A gloss is the conventional abbreviated rendering of a parsed word, e.g.
"T1-S2.N-s-lţ/9₁-ABS". Slots are joined with dashes, categories within a
slot with dots, and empty values never leave stray separators behind.
"""
from enum import Flag, auto
from typing import Iterable


class GlossFlags(Flag):
    """Options controlling how values are glossed."""
    NONE = 0
    LONG = auto()
    SHOW_DEFAULTS = auto()
    FORMAT_MARKDOWN = auto()


def join_dashed(parts: Iterable[str]) -> str:
    """Join non-empty gloss parts with dashes."""
    return "-".join(part for part in parts if part)


def join_dotted(parts: Iterable[str]) -> str:
    """Join non-empty gloss parts with dots."""
    return ".".join(part for part in parts if part)


def gloss_non_default(item, flags: GlossFlags) -> str:
    """Gloss an item, or return an empty string when it holds its default value.

    With SHOW_DEFAULTS every item is glossed.
    """
    if not flags & GlossFlags.SHOW_DEFAULTS and item.is_default():
        return ""
    return item.gloss(flags)


def format_consonant(consonant: str, flags: GlossFlags) -> str:
    """Render a root or affix consonant form, bolded for markdown output."""
    if flags & GlossFlags.FORMAT_MARKDOWN:
        return f"**{consonant}**"
    return consonant
