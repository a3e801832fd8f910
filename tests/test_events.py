import itertools

import pytest
from inotify_simple import flags

from eventwait.errors import ConfigurationError
from eventwait.events import DEFAULT_MASK, EVENT_MASKS, build_mask, event_names


def test_empty_filter_gives_default_mask():
    expected = (
        flags.ACCESS | flags.ATTRIB | flags.CLOSE_WRITE | flags.CLOSE_NOWRITE
        | flags.CREATE | flags.DELETE | flags.DELETE_SELF | flags.MODIFY
        | flags.MOVED_FROM | flags.MOVED_TO | flags.MOVE_SELF | flags.OPEN
    )
    assert build_mask([]) == expected
    assert build_mask([]) == DEFAULT_MASK == 0xFFF


def test_single_tokens():
    assert build_mask(["create"]) == flags.CREATE
    assert build_mask(["close"]) == flags.CLOSE_WRITE | flags.CLOSE_NOWRITE
    assert build_mask(["move"]) == flags.MOVED_FROM | flags.MOVED_TO
    assert build_mask(["moved_self"]) == flags.MOVE_SELF
    assert build_mask(["move_self"]) == flags.MOVE_SELF


def test_mask_is_or_of_tokens_in_any_order():
    tokens = ["create", "delete", "close_write", "attrib"]
    expected = 0
    for token in tokens:
        expected |= EVENT_MASKS[token]
    for order in itertools.permutations(tokens):
        assert build_mask(order) == expected


def test_repeated_tokens_are_idempotent():
    assert build_mask(["modify", "modify", "modify"]) == build_mask(["modify"])
    assert build_mask(["close", "close_write"]) == build_mask(["close"])


def test_tokens_are_case_insensitive():
    assert build_mask(["CREATE", " Delete "]) == flags.CREATE | flags.DELETE


@pytest.mark.parametrize("token", ["bogus", "created", "", "isdir"])
def test_unknown_token_is_configuration_error(token):
    with pytest.raises(ConfigurationError) as excinfo:
        build_mask(["create", token])
    assert f"unknown event type: {token}" in str(excinfo.value)


def test_event_names_decodes_kernel_bits():
    assert event_names(flags.CREATE | flags.ISDIR) == ["CREATE", "ISDIR"]
    assert event_names(flags.CLOSE_NOWRITE) == ["CLOSE_NOWRITE"]
    assert event_names(flags.IGNORED) == ["IGNORED"]
    assert event_names(0) == []
