from __future__ import annotations

import pytest

from termprompt.prompt import InjectionChannel


def test_new_channel_is_empty():
    channel = InjectionChannel()

    assert not channel.has_value
    with pytest.raises(LookupError):
        channel.value


def test_inject_and_release():
    channel = InjectionChannel()
    channel.inject("answer")

    assert channel.has_value
    assert channel.value == "answer"

    channel.release()
    assert not channel.has_value


def test_none_is_a_valid_injected_value():
    channel = InjectionChannel(None)

    assert channel.has_value
    assert channel.value is None


def test_inject_replaces_previous_value():
    channel = InjectionChannel("first")
    channel.inject("second")

    assert channel.value == "second"


def test_release_of_empty_channel_is_a_no_op():
    channel = InjectionChannel()
    channel.release()

    assert not channel.has_value
