"""Commands on hashes: HSET, HGET, HDEL and the rest of the H family."""

from __future__ import annotations

from typing import Any, List

from .commands_kv import _error_as_reply, _expect_at_least, _expect_exactly, _register
from .registry import CommandRegistry

HDEL_COMMAND = "HDEL"
HEXISTS_COMMAND = "HEXISTS"
HGET_COMMAND = "HGET"
HGETALL_COMMAND = "HGETALL"
HKEYS_COMMAND = "HKEYS"
HLEN_COMMAND = "HLEN"
HSET_COMMAND = "HSET"
HVALS_COMMAND = "HVALS"


# HDEL

def register_hdel_command(registry: CommandRegistry) -> None:
    _register(registry, HDEL_COMMAND, validate_hdel, execute_hdel, is_write=True)


def validate_hdel(args: List[str]) -> None:
    _expect_at_least(args, 2)


@_error_as_reply
def execute_hdel(args: List[str], store: Any) -> str:
    store.hdel(args[0], args[1:])
    return "OK\n"


# HEXISTS

def register_hexists_command(registry: CommandRegistry) -> None:
    _register(registry, HEXISTS_COMMAND, validate_hexists, execute_hexists)


def validate_hexists(args: List[str]) -> None:
    _expect_exactly(args, 2)


@_error_as_reply
def execute_hexists(args: List[str], store: Any) -> str:
    return "true" if store.hexists(args[0], args[1]) else "false"


# HGET

def register_hget_command(registry: CommandRegistry) -> None:
    _register(registry, HGET_COMMAND, validate_hget, execute_hget)


def validate_hget(args: List[str]) -> None:
    _expect_exactly(args, 2)


@_error_as_reply
def execute_hget(args: List[str], store: Any) -> str:
    return store.hget(args[0], args[1])


# HGETALL

def register_hgetall_command(registry: CommandRegistry) -> None:
    _register(registry, HGETALL_COMMAND, validate_hgetall, execute_hgetall)


def validate_hgetall(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_hgetall(args: List[str], store: Any) -> str:
    return store.hgetall(args[0])


# HKEYS

def register_hkeys_command(registry: CommandRegistry) -> None:
    _register(registry, HKEYS_COMMAND, validate_hkeys, execute_hkeys)


def validate_hkeys(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_hkeys(args: List[str], store: Any) -> str:
    return store.hkeys(args[0])


# HLEN

def register_hlen_command(registry: CommandRegistry) -> None:
    _register(registry, HLEN_COMMAND, validate_hlen, execute_hlen)


def validate_hlen(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_hlen(args: List[str], store: Any) -> str:
    return str(store.hlen(args[0]))


# HSET

def register_hset_command(registry: CommandRegistry) -> None:
    _register(registry, HSET_COMMAND, validate_hset, execute_hset, is_write=True)


def validate_hset(args: List[str]) -> None:
    _expect_at_least(args, 3)


@_error_as_reply
def execute_hset(args: List[str], store: Any) -> str:
    store.hset(args[0], args[1:])
    return "OK\n"


# HVALS

def register_hvals_command(registry: CommandRegistry) -> None:
    _register(registry, HVALS_COMMAND, validate_hvals, execute_hvals)


def validate_hvals(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_hvals(args: List[str], store: Any) -> str:
    return store.hvals(args[0])