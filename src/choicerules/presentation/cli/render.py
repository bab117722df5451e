"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from choicerules.domain.choice_models import ChoicePromptView
from choicerules.services.choice_processor import DISABLED_TEXT_MARKER

DISABLED_SUFFIX = " (disabled)"
HIGHLIGHT_MARK = ">"


def format_choice_label(label: str) -> str:
    """Replace the muted-colour escape with a plain-text suffix."""
    if label.startswith(DISABLED_TEXT_MARKER):
        return label[len(DISABLED_TEXT_MARKER):] + DISABLED_SUFFIX
    return label


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_choice_menu(title: str, view: ChoicePromptView) -> None:
    """Display numbered choices, marking the highlighted default row."""
    render_heading(title)
    for row, label in enumerate(view.labels):
        marker = HIGHLIGHT_MARK if row == view.initial_index else " "
        print(f"{marker} {row + 1}. {format_choice_label(label)}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")
