import pytest

from treds import commands_list as cl
from treds.registry import CommandError, CommandRegistry


class StoreError(Exception):
    pass


class RecordingStore:
    """Records every call and returns a fixed result or raises a fixed error."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result
        self.error = error

    def __getattr__(self, name):
        def method(*args):
            self.calls.append((name, args))
            if self.error is not None:
                raise self.error
            return self.result

        return method


REGISTRATIONS = [
    (cl.register_lindex_command, "LINDEX", False),
    (cl.register_llen_command, "LLEN", False),
    (cl.register_lpop_command, "LPOP", True),
    (cl.register_lpush_command, "LPUSH", True),
    (cl.register_lrange_command, "LRANGE", False),
    (cl.register_lrem_command, "LREM", True),
    (cl.register_lset_command, "LSET", True),
    (cl.register_rpop_command, "RPOP", True),
    (cl.register_rpush_command, "RPUSH", True),
]


@pytest.mark.parametrize("register, name, is_write", REGISTRATIONS)
def test_register(register, name, is_write):
    registry = CommandRegistry()
    register(registry)
    assert name in registry
    assert registry.retrieve(name.lower()).is_write is is_write


def test_all_list_commands_share_one_registry():
    registry = CommandRegistry()
    for register, _, _ in REGISTRATIONS:
        register(registry)
    assert len(registry) == len(REGISTRATIONS)


def test_rpop_and_rpush_share_validation():
    registry = CommandRegistry()
    cl.register_rpop_command(registry)
    cl.register_rpush_command(registry)
    assert registry.retrieve("RPOP").validate is cl.validate_lpop
    assert registry.retrieve("RPUSH").validate is cl.validate_lpush


@pytest.mark.parametrize(
    "validate, args",
    [
        (cl.validate_lindex, ["l", "0"]),
        (cl.validate_llen, ["l"]),
        (cl.validate_lpop, ["l", "1"]),
        (cl.validate_lpush, ["l", "a"]),
        (cl.validate_lpush, ["l", "a", "b"]),
        (cl.validate_lrange, ["l", "0", "1"]),
        (cl.validate_lrem, ["l", "0"]),
        (cl.validate_lset, ["l", "0", "a"]),
        (cl.validate_lset, ["l", "0", "a", "b"]),
    ],
)
def test_validate_accepts(validate, args):
    assert validate(args) is None


@pytest.mark.parametrize(
    "validate, args, message",
    [
        (cl.validate_lindex, ["l"], "expected 2 argument, got 1"),
        (cl.validate_llen, [], "expected 1 argument, got 0"),
        (cl.validate_lpop, ["l"], "expected 2 argument, got 1"),
        (cl.validate_lpush, ["l"], "expected minimum 2 argument, got 1"),
        (cl.validate_lrange, ["l", "0"], "expected 3 argument, got 2"),
        (cl.validate_lrem, ["l", "0", "1"], "expected 2 argument, got 3"),
        (cl.validate_lset, ["l", "0"], "expected 3 argument, got 2"),
    ],
)
def test_validate_rejects(validate, args, message):
    with pytest.raises(CommandError) as info:
        validate(args)
    assert str(info.value) == message


def test_lindex_passes_all_args():
    store = RecordingStore(result="a")
    assert cl.execute_lindex(["l", "2"], store) == "a"
    assert store.calls == [("lindex", (["l", "2"],))]


def test_llen_returns_store_result():
    store = RecordingStore(result="3\n")
    assert cl.execute_llen(["l"], store) == "3\n"
    assert store.calls == [("llen", ("l",))]


@pytest.mark.parametrize(
    "execute, method", [(cl.execute_lpop, "lpop"), (cl.execute_rpop, "rpop")]
)
def test_pop_parses_count(execute, method):
    store = RecordingStore(result="a\nb\n")
    assert execute(["l", "2"], store) == "a\nb\n"
    assert store.calls == [(method, ("l", 2))]


@pytest.mark.parametrize("execute", [cl.execute_lpop, cl.execute_rpop])
def test_pop_bad_count_is_reported(execute):
    store = RecordingStore()
    reply = execute(["l", "many"], store)
    assert "many" in reply
    assert store.calls == []


@pytest.mark.parametrize(
    "execute, method", [(cl.execute_lpush, "lpush"), (cl.execute_rpush, "rpush")]
)
def test_push_passes_args(execute, method):
    store = RecordingStore()
    assert execute(["l", "a", "b"], store) == "OK\n"
    assert store.calls == [(method, (["l", "a", "b"],))]


def test_lrange_parses_bounds():
    store = RecordingStore(result="a\n")
    assert cl.execute_lrange(["l", "0", "-1"], store) == "a\n"
    assert store.calls == [("lrange", ("l", 0, -1))]


@pytest.mark.parametrize("args", [["l", "x", "1"], ["l", "0", "y"]])
def test_lrange_bad_bounds(args):
    store = RecordingStore()
    reply = cl.execute_lrange(args, store)
    assert store.calls == []
    assert any(bad in reply for bad in ("x", "y"))


def test_lrem_parses_index():
    store = RecordingStore()
    assert cl.execute_lrem(["l", "1"], store) == "OK\n"
    assert store.calls == [("lrem", ("l", 1))]


def test_lset_joins_element_words():
    store = RecordingStore()
    assert cl.execute_lset(["l", "0", "hello", "world"], store) == "OK\n"
    assert store.calls == [("lset", ("l", 0, "hello world"))]


def test_lset_bad_index():
    store = RecordingStore()
    reply = cl.execute_lset(["l", "abc", "v"], store)
    assert "abc" in reply
    assert store.calls == []


@pytest.mark.parametrize(
    "execute, args",
    [
        (cl.execute_lindex, ["l", "0"]),
        (cl.execute_llen, ["l"]),
        (cl.execute_lpop, ["l", "1"]),
        (cl.execute_lpush, ["l", "a"]),
        (cl.execute_lrange, ["l", "0", "1"]),
        (cl.execute_lrem, ["l", "0"]),
        (cl.execute_lset, ["l", "0", "a"]),
        (cl.execute_rpop, ["l", "1"]),
        (cl.execute_rpush, ["l", "a"]),
    ],
)
def test_store_error_becomes_reply(execute, args):
    store = RecordingStore(error=StoreError("key does not exist"))
    assert execute(args, store) == "key does not exist"