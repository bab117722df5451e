import logging

import pytest

from choicerules.services.tag_extractor import extract_tags


def test_plain_text_has_no_markup() -> None:
    extraction = extract_tags("Walk away")

    assert extraction.label == "Walk away"
    assert extraction.disable_rules is None
    assert extraction.hide_rules is None
    assert not extraction.has_markup
    assert not extraction.illegal_position


def test_disable_block_only() -> None:
    extraction = extract_tags("<<[s[3],!s[4]]>>Hello")

    assert extraction.label == "Hello"
    assert extraction.disable_rules == "s[3],!s[4]"
    assert extraction.hide_rules is None


def test_hide_block_only() -> None:
    extraction = extract_tags("(([v[65]<70]))World")

    assert extraction.label == "World"
    assert extraction.hide_rules == "v[65]<70"
    assert extraction.disable_rules is None


@pytest.mark.parametrize(
    "raw",
    [
        "<<[s[1]]>>(([v[2]>=3]))Both",
        "(([v[2]>=3]))<<[s[1]]>>Both",
    ],
)
def test_both_blocks_in_either_order(raw: str) -> None:
    extraction = extract_tags(raw)

    assert extraction.label == "Both"
    assert extraction.disable_rules == "s[1]"
    assert extraction.hide_rules == "v[2]>=3"


def test_empty_block_body() -> None:
    extraction = extract_tags("<<[]>>Always disabled")

    assert extraction.disable_rules == ""
    assert extraction.label == "Always disabled"


@pytest.mark.parametrize(
    "raw",
    [
        "Hello <<[s[1]]>>",
        "Hello (([s[1]]))",
        "<<[s[1]]>>Hi(([s[2]]))",
        "(([s[2]]))Hi<<[s[1]]>>",
        "x<<[s[1]]>>(([s[2]]))Hi",
    ],
)
def test_illegal_position_keeps_text_verbatim(raw: str, caplog) -> None:
    with caplog.at_level(logging.WARNING):
        extraction = extract_tags(raw)

    assert extraction.illegal_position
    assert extraction.label == raw
    assert not extraction.has_markup
    assert "illegal position" in caplog.text
    assert raw in caplog.text


def test_unclosed_marker_is_plain_text() -> None:
    extraction = extract_tags("<<[s[1] Hello")

    assert extraction.label == "<<[s[1] Hello"
    assert not extraction.illegal_position
