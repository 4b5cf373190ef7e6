from __future__ import annotations

import pytest

from termprompt.prompt.backends.prompt_toolkit import Vt100KeyDecoder
from termprompt.prompt.dataclasses import KeyEvent


@pytest.fixture
def decoder() -> Vt100KeyDecoder:
    return Vt100KeyDecoder()


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\r", KeyEvent(name="return", sequence="\r")),
        (b"\n", KeyEvent(name="enter", sequence="\n")),
        (b"\t", KeyEvent(name="tab", sequence="\t")),
        (b"\x7f", KeyEvent(name="backspace", sequence="\x7f")),
        (b"\x03", KeyEvent(name="c", sequence="\x03", ctrl=True)),
        (b" ", KeyEvent(name="space", sequence=" ")),
        (b"a", KeyEvent(name="a", sequence="a")),
        (b"A", KeyEvent(name="a", sequence="A", shift=True)),
        (b"7", KeyEvent(name="7", sequence="7")),
        (b"\x1b[A", KeyEvent(name="up", sequence="\x1b[A")),
        (b"\x1b[Z", KeyEvent(name="tab", sequence="\x1b[Z", shift=True)),
        (b"\x1bb", KeyEvent(name="b", sequence="\x1bb", meta=True)),
    ],
)
def test_single_key(decoder, data, expected):
    assert decoder.decode(data) == [expected]


def test_punctuation_has_no_name(decoder):
    assert decoder.decode(b"?") == [KeyEvent(sequence="?")]


def test_lone_escape(decoder):
    assert decoder.decode(b"\x1b") == [KeyEvent(name="escape", sequence="\x1b")]


def test_multiple_keys_in_one_chunk(decoder):
    events = decoder.decode(b"hi\r")

    assert [event.name for event in events] == ["h", "i", "return"]


def test_empty_chunk_decodes_to_nothing(decoder):
    assert decoder.decode(b"") == []


def test_multibyte_character_split_across_reads(decoder):
    encoded = "é".encode("utf-8")

    assert decoder.decode(encoded[:1]) == []
    assert decoder.decode(encoded[1:]) == [KeyEvent(sequence="é")]


def test_bracketed_paste_is_a_single_event(decoder):
    events = decoder.decode(b"\x1b[200~pasted\x1b[201~")

    assert events == [KeyEvent(sequence="pasted")]
