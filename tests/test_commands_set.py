from unittest.mock import Mock

import pytest

from treds import commands_set as cs
from treds.registry import CommandError, CommandRegistry


def test_register_sadd_is_write():
    registry = CommandRegistry()
    cs.register_sadd_command(registry)
    assert registry.retrieve("sadd").is_write is True


def test_register_smembers_is_read():
    registry = CommandRegistry()
    cs.register_smembers_command(registry)
    assert registry.retrieve("SMEMBERS").is_write is False


def test_srem_shares_sadd_validation():
    registry = CommandRegistry()
    cs.register_srem_command(registry)
    reg = registry.retrieve("SREM")
    assert reg.is_write is True
    with pytest.raises(CommandError, match="expected minimum 2 argument, got 1"):
        reg.validate(["key"])


@pytest.mark.parametrize("args", [[], ["key"]])
def test_validate_sadd_rejects_short(args):
    with pytest.raises(CommandError, match=f"got {len(args)}"):
        cs.validate_sadd(args)


def test_validate_scard_exact():
    with pytest.raises(CommandError, match="expected 1 argument, got 2"):
        cs.validate_scard(["a", "b"])


@pytest.mark.parametrize(
    "validate", [cs.validate_sdiff, cs.validate_sinter, cs.validate_sunion]
)
def test_set_algebra_needs_a_key(validate):
    with pytest.raises(CommandError, match="expected minimum 1 argument, got 0"):
        validate([])


def test_validate_sismember_message():
    with pytest.raises(CommandError, match="expected 2 argument, got 1"):
        cs.validate_sismember(["key"])


def test_execute_sadd_passes_members():
    store = Mock()
    assert cs.execute_sadd(["s", "a", "b"], store) == "OK\n"
    store.sadd.assert_called_once_with("s", ["a", "b"])


def test_execute_srem_passes_members():
    store = Mock()
    assert cs.execute_srem(["s", "a"], store) == "OK\n"
    store.srem.assert_called_once_with("s", ["a"])


def test_execute_scard_formats_number():
    store = Mock()
    store.scard.return_value = 4
    assert cs.execute_scard(["s"], store) == "4"


@pytest.mark.parametrize(
    "execute, method",
    [
        (cs.execute_sdiff, "sdiff"),
        (cs.execute_sinter, "sinter"),
        (cs.execute_sunion, "sunion"),
    ],
)
def test_set_algebra_forwards_all_keys(execute, method):
    store = Mock()
    getattr(store, method).return_value = "result"
    assert execute(["a", "b"], store) == "result"
    getattr(store, method).assert_called_once_with(["a", "b"])


def test_execute_sismember_joins_member():
    store = Mock()
    store.sismember.return_value = True
    assert cs.execute_sismember(["s", "hello", "world"], store) == "1"
    store.sismember.assert_called_once_with("s", "hello world")


def test_execute_sismember_absent():
    store = Mock()
    store.sismember.return_value = False
    assert cs.execute_sismember(["s", "x"], store) == "0"


def test_store_error_becomes_reply():
    store = Mock()
    store.smembers.side_effect = ValueError("boom")
    assert cs.execute_smembers(["s"], store) == "boom"