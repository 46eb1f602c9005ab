"""Commands on plain keys and values: GET, SET, DEL, scans and friends."""

from __future__ import annotations

import functools
import re
from datetime import datetime, timedelta
from typing import Any, Callable, List

from .registry import CommandError, CommandRegistration, CommandRegistry

DB_SIZE = "DBSIZE"
DELETE_COMMAND = "DEL"
DELETE_PREFIX_COMMAND = "DELPREFIX"
EXPIRE_COMMAND = "EXPIRE"
FLUSH_ALL = "FLUSHALL"
GET_COMMAND = "GET"
KEYS_COMMAND = "KEYS"
KVS_COMMAND = "KVS"
LONGEST_PREFIX_COMMAND = "LNGPREFIX"
MGET_COMMAND = "MGET"
MSET_COMMAND = "MSET"
PING = "PING"
PREFIX_SCAN_KEYS_COMMAND = "SCANKEYS"
PREFIX_SCAN_COMMAND = "SCANKVS"
SET_COMMAND = "SET"
TTL_COMMAND = "TTL"

MAX_INT64 = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    """Parse a decimal 64-bit integer strictly, raising CommandError otherwise."""
    if not _INT_PATTERN.fullmatch(text):
        raise CommandError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not -(2**63) <= value <= MAX_INT64:
        raise CommandError(f'parsing "{text}": value out of range')
    return value


def _atoi_or_zero(text: str) -> int:
    try:
        return _atoi(text)
    except CommandError:
        return 0


def _line(text: str) -> str:
    return f"{text}\n"


def _error_as_reply(func: Callable[[List[str], Any], str]) -> Callable[[List[str], Any], str]:
    """Turn an error raised by the store into the reply text."""

    @functools.wraps(func)
    def wrapper(args: List[str], store: Any) -> str:
        try:
            return func(args, store)
        except Exception as err:  # the store reports failures as exceptions
            return str(err)

    return wrapper


def _expect_exactly(args: List[str], count: int) -> None:
    if len(args) != count:
        raise CommandError(f"expected {count} argument, got {len(args)}")


def _expect_at_least(args: List[str], count: int) -> None:
    if len(args) < count:
        raise CommandError(f"expected minimum {count} argument, got {len(args)}")


def _register(
    registry: CommandRegistry,
    name: str,
    validate: Callable[[List[str]], None],
    execute: Callable[[List[str], Any], str],
    is_write: bool = False,
) -> None:
    registry.add(CommandRegistration(name, validate, execute, is_write))


# DBSIZE

def register_db_size_command(registry: CommandRegistry) -> None:
    _register(registry, DB_SIZE, validate_db_size, execute_db_size)


def validate_db_size(args: List[str]) -> None:
    """Accept any number of arguments."""
    _expect_at_least(args, 0)


@_error_as_reply
def execute_db_size(args: List[str], store: Any) -> str:
    return store.size()


# DEL

def register_delete_command(registry: CommandRegistry) -> None:
    _register(registry, DELETE_COMMAND, validate_del, execute_del, is_write=True)


def validate_del(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_del(args: List[str], store: Any) -> str:
    store.delete(args[0])
    return "OK\n"


# DELPREFIX

def register_delete_prefix_command(registry: CommandRegistry) -> None:
    _register(
        registry,
        DELETE_PREFIX_COMMAND,
        validate_delete_prefix,
        execute_delete_prefix,
        is_write=True,
    )


def validate_delete_prefix(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_delete_prefix(args: List[str], store: Any) -> str:
    return str(store.delete_prefix(args[0]))


# EXPIRE

def register_expire_command(registry: CommandRegistry) -> None:
    _register(registry, EXPIRE_COMMAND, validate_expire, execute_expire, is_write=True)


def validate_expire(args: List[str]) -> None:
    if len(args) != 2:
        if len(args) > 1:
            _atoi(args[1])
        raise CommandError(f"expected 1 argument, got {len(args)}")


@_error_as_reply
def execute_expire(args: List[str], store: Any) -> str:
    seconds = _atoi_or_zero(args[1])
    store.expire(args[0], datetime.now() + timedelta(seconds=seconds))
    return "OK\n"


# FLUSHALL

def register_flush_all_command(registry: CommandRegistry) -> None:
    _register(registry, FLUSH_ALL, validate_db_size, execute_flush_all, is_write=True)


@_error_as_reply
def execute_flush_all(args: List[str], store: Any) -> str:
    store.flush_all()
    return "OK\n"


# GET

def register_get_command(registry: CommandRegistry) -> None:
    _register(registry, GET_COMMAND, validate_get, execute_get)


def validate_get(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_get(args: List[str], store: Any) -> str:
    return store.get(args[0])


# KEYS and KVS

def _validate_regex_scan(args: List[str]) -> None:
    _expect_at_least(args, 2)
    if len(args) == 3:
        _atoi(args[2])
    try:
        re.compile(args[1])
    except re.error as err:
        raise CommandError(f"error parsing regexp: {err}") from None


def _regex_scan_args(args: List[str]) -> tuple:
    regex = args[1] if len(args) >= 2 else ""
    count = _atoi_or_zero(args[2]) if len(args) == 3 else MAX_INT64
    return args[0], regex, count


def register_keys_command(registry: CommandRegistry) -> None:
    _register(registry, KEYS_COMMAND, validate_keys, execute_keys)


def validate_keys(args: List[str]) -> None:
    _validate_regex_scan(args)


@_error_as_reply
def execute_keys(args: List[str], store: Any) -> str:
    return str(store.keys(*_regex_scan_args(args)))


def register_kvs_command(registry: CommandRegistry) -> None:
    _register(registry, KVS_COMMAND, validate_kvs, execute_kvs)


def validate_kvs(args: List[str]) -> None:
    _validate_regex_scan(args)


@_error_as_reply
def execute_kvs(args: List[str], store: Any) -> str:
    return str(store.kvs(*_regex_scan_args(args)))


# LNGPREFIX

def register_longest_prefix_command(registry: CommandRegistry) -> None:
    _register(
        registry, LONGEST_PREFIX_COMMAND, validate_delete_prefix, execute_longest_prefix
    )


@_error_as_reply
def execute_longest_prefix(args: List[str], store: Any) -> str:
    return store.longest_prefix(args[0])


# MGET

def register_mget_command(registry: CommandRegistry) -> None:
    _register(registry, MGET_COMMAND, validate_mget, execute_mget)


def validate_mget(args: List[str]) -> None:
    if not args:
        raise CommandError(f"expected atlest 1 argument, got {len(args)}")


@_error_as_reply
def execute_mget(args: List[str], store: Any) -> str:
    return store.mget(args)


# MSET

def register_mset_command(registry: CommandRegistry) -> None:
    _register(registry, MSET_COMMAND, validate_mset, execute_mset, is_write=True)


def validate_mset(args: List[str]) -> None:
    _expect_at_least(args, 2)


@_error_as_reply
def execute_mset(args: List[str], store: Any) -> str:
    store.mset(args)
    return "OK\n"


# PING

def register_ping_command(registry: CommandRegistry) -> None:
    _register(registry, PING, validate_db_size, execute_ping)


def execute_ping(args: List[str], store: Any) -> str:
    """Reply PONG whatever the arguments."""
    return _line("PONG")


# SCANKEYS and SCANKVS

def _validate_prefix_scan(args: List[str]) -> None:
    _expect_at_least(args, 2)
    if len(args) > 3:
        raise CommandError(f"expected maximum 3 argument, got {len(args)}")


def _prefix_scan_args(args: List[str]) -> tuple:
    count = args[2] if len(args) == 3 else str(MAX_INT64)
    return args[0], args[1], count


def register_scan_keys_command(registry: CommandRegistry) -> None:
    _register(
        registry,
        PREFIX_SCAN_KEYS_COMMAND,
        validate_prefix_scan_keys,
        execute_prefix_scan_keys,
    )


def validate_prefix_scan_keys(args: List[str]) -> None:
    _validate_prefix_scan(args)


@_error_as_reply
def execute_prefix_scan_keys(args: List[str], store: Any) -> str:
    return store.prefix_scan_keys(*_prefix_scan_args(args))


def register_scan_kvs_command(registry: CommandRegistry) -> None:
    _register(registry, PREFIX_SCAN_COMMAND, validate_prefix_scan, execute_prefix_scan)


def validate_prefix_scan(args: List[str]) -> None:
    _validate_prefix_scan(args)


@_error_as_reply
def execute_prefix_scan(args: List[str], store: Any) -> str:
    return store.prefix_scan(*_prefix_scan_args(args))


# SET

def register_set_command(registry: CommandRegistry) -> None:
    _register(registry, SET_COMMAND, validate_set, execute_set, is_write=True)


def validate_set(args: List[str]) -> None:
    if len(args) < 2:
        raise CommandError(f"expected 2 argument, got {len(args)}")


@_error_as_reply
def execute_set(args: List[str], store: Any) -> str:
    store.set(args[0], " ".join(args[1:]))
    return "OK\n"


# TTL

def register_ttl_command(registry: CommandRegistry) -> None:
    _register(registry, TTL_COMMAND, validate_ttl, execute_ttl)


def validate_ttl(args: List[str]) -> None:
    _expect_exactly(args, 1)


def execute_ttl(args: List[str], store: Any) -> str:
    return _line(str(store.ttl(args[0])))