"""
module termprompt.prompt.layout

Contains the helpers used to measure how many terminal rows a rendered
prompt occupies
"""

import math

from prompt_toolkit.formatted_text import (
    fragment_list_width,
    split_lines,
    StyleAndTextTuples,
    to_plain_text,
)


def count_lines(fragments: StyleAndTextTuples, columns: int | None) -> int:
    """
    Counts the number of terminal rows that the provided styled text occupies
    once written. Lines wider than the terminal are counted once for every row
    they wrap onto; empty lines still occupy a row

    Args:
        fragments (StyleAndTextTuples): The styled text to measure
        columns (int | None): The width of the terminal or None if unknown.
            Without a width, only newlines are counted

    Returns:
        int: The number of rows the text occupies

    Raises:
        Nothing
    """

    if not columns:
        return to_plain_text(fragments).count("\n") + 1

    line_count: int = 0
    for line in split_lines(fragments):
        width: int = fragment_list_width(line)
        line_count += math.ceil(width / columns) if width > columns else 1

    return line_count
