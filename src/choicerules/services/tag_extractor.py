"""Strip disable/hide markup from a raw choice string."""
from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)

DISABLE_OPEN = "<<["
DISABLE_CLOSE = "]>>"
HIDE_OPEN = "((["
HIDE_CLOSE = "]))"


@dataclass(frozen=True, slots=True)
class TagExtraction:
    """Residual label plus the raw rule block bodies, when present."""

    label: str
    disable_rules: str | None = None
    hide_rules: str | None = None
    illegal_position: bool = False

    @property
    def has_markup(self) -> bool:
        return self.disable_rules is not None or self.hide_rules is not None


def extract_tags(raw_text: str) -> TagExtraction:
    """Split ``raw_text`` into disable block, hide block, and label.

    Blocks must lead the text; when both are present they must be adjacent,
    in either order. Misplaced markup leaves the text untouched.
    """
    has_disable = _contains_block(raw_text, DISABLE_OPEN, DISABLE_CLOSE)
    has_hide = _contains_block(raw_text, HIDE_OPEN, HIDE_CLOSE)

    if has_disable and has_hide:
        return _extract_both(raw_text)
    if has_disable:
        stripped = _strip_leading_block(raw_text, DISABLE_OPEN, DISABLE_CLOSE)
        if stripped is not None:
            return TagExtraction(label=stripped[1], disable_rules=stripped[0])
        return _illegal(raw_text)
    if has_hide:
        stripped = _strip_leading_block(raw_text, HIDE_OPEN, HIDE_CLOSE)
        if stripped is not None:
            return TagExtraction(label=stripped[1], hide_rules=stripped[0])
        return _illegal(raw_text)
    return TagExtraction(label=raw_text)


def _extract_both(raw_text: str) -> TagExtraction:
    if raw_text.startswith(DISABLE_OPEN):
        first = _strip_leading_block(raw_text, DISABLE_OPEN, DISABLE_CLOSE)
        second = first and _strip_leading_block(first[1], HIDE_OPEN, HIDE_CLOSE)
        if first and second:
            return TagExtraction(label=second[1], disable_rules=first[0], hide_rules=second[0])
    elif raw_text.startswith(HIDE_OPEN):
        first = _strip_leading_block(raw_text, HIDE_OPEN, HIDE_CLOSE)
        second = first and _strip_leading_block(first[1], DISABLE_OPEN, DISABLE_CLOSE)
        if first and second:
            return TagExtraction(label=second[1], disable_rules=second[0], hide_rules=first[0])
    return _illegal(raw_text)


def _contains_block(text: str, opener: str, closer: str) -> bool:
    return opener in text and closer in text


def _strip_leading_block(text: str, opener: str, closer: str) -> tuple[str, str] | None:
    if not text.startswith(opener):
        return None
    body, found, rest = text[len(opener):].partition(closer)
    if not found:
        return None
    return body, rest


def _illegal(raw_text: str) -> TagExtraction:
    log.warning(f"Choice markup in illegal position for choice: {raw_text}")
    return TagExtraction(label=raw_text, illegal_position=True)
