from __future__ import annotations

import math

import pytest
from prompt_toolkit.formatted_text import ANSI, FormattedText, to_formatted_text

from termprompt.prompt.layout import count_lines


@pytest.mark.parametrize("length", [1, 79, 80, 81, 160, 161, 200])
def test_single_line_wraps_by_terminal_width(length):
    fragments = FormattedText([("", "x" * length)])

    assert count_lines(fragments, 80) == math.ceil(length / 80)


def test_empty_line_still_occupies_a_row():
    assert count_lines(FormattedText([("", "")]), 80) == 1
    assert count_lines(FormattedText([("", "a\n\nb")]), 80) == 3


def test_each_logical_line_is_measured_separately():
    fragments = FormattedText([("", "short\n"), ("bold", "y" * 100)])

    assert count_lines(fragments, 80) == 3


def test_styles_and_escape_sequences_do_not_count_towards_width():
    styled = FormattedText([("bold", "x" * 40), ("fg:ansired", "x" * 40)])
    ansi = to_formatted_text(ANSI("\x1b[1;31m" + "x" * 80 + "\x1b[0m"))

    assert count_lines(styled, 80) == 1
    assert count_lines(ansi, 80) == 1


def test_wide_characters_count_double():
    assert count_lines(FormattedText([("", "日" * 41)]), 80) == 2


def test_unknown_width_counts_newlines_only():
    fragments = FormattedText([("", "z" * 500 + "\n" + "z" * 500 + "\nend")])

    assert count_lines(fragments, None) == 3
