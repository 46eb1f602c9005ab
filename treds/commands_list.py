"""Commands on lists: pushes, pops, ranges and indexed access."""

from __future__ import annotations

from typing import Any, List

from .commands_kv import (
    _atoi,
    _error_as_reply,
    _expect_at_least,
    _expect_exactly,
    _register,
)
from .registry import CommandError, CommandRegistry

LINDEX_COMMAND = "LINDEX"
LLEN_COMMAND = "LLEN"
LPOP_COMMAND = "LPOP"
LPUSH_COMMAND = "LPUSH"
LRANGE_COMMAND = "LRANGE"
LREM_COMMAND = "LREM"
LSET_COMMAND = "LSET"
RPOP_COMMAND = "RPOP"
RPUSH_COMMAND = "RPUSH"


# LINDEX

def register_lindex_command(registry: CommandRegistry) -> None:
    _register(registry, LINDEX_COMMAND, validate_lindex, execute_lindex)


def validate_lindex(args: List[str]) -> None:
    _expect_exactly(args, 2)


@_error_as_reply
def execute_lindex(args: List[str], store: Any) -> str:
    return store.lindex(args)


# LLEN

def register_llen_command(registry: CommandRegistry) -> None:
    _register(registry, LLEN_COMMAND, validate_llen, execute_llen)


def validate_llen(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_llen(args: List[str], store: Any) -> str:
    return store.llen(args[0])


# LPOP

def register_lpop_command(registry: CommandRegistry) -> None:
    _register(registry, LPOP_COMMAND, validate_lpop, execute_lpop, is_write=True)


def validate_lpop(args: List[str]) -> None:
    _expect_exactly(args, 2)


@_error_as_reply
def execute_lpop(args: List[str], store: Any) -> str:
    return store.lpop(args[0], _atoi(args[1]))


# LPUSH

def register_lpush_command(registry: CommandRegistry) -> None:
    _register(registry, LPUSH_COMMAND, validate_lpush, execute_lpush, is_write=True)


def validate_lpush(args: List[str]) -> None:
    _expect_at_least(args, 2)


@_error_as_reply
def execute_lpush(args: List[str], store: Any) -> str:
    store.lpush(args)
    return "OK\n"


# LRANGE

def register_lrange_command(registry: CommandRegistry) -> None:
    _register(registry, LRANGE_COMMAND, validate_lrange, execute_lrange)


def validate_lrange(args: List[str]) -> None:
    _expect_exactly(args, 3)


@_error_as_reply
def execute_lrange(args: List[str], store: Any) -> str:
    start = _atoi(args[1])
    stop = _atoi(args[2])
    return store.lrange(args[0], start, stop)


# LREM

def register_lrem_command(registry: CommandRegistry) -> None:
    _register(registry, LREM_COMMAND, validate_lrem, execute_lrem, is_write=True)


def validate_lrem(args: List[str]) -> None:
    _expect_exactly(args, 2)


@_error_as_reply
def execute_lrem(args: List[str], store: Any) -> str:
    store.lrem(args[0], _atoi(args[1]))
    return "OK\n"


# LSET

def register_lset_command(registry: CommandRegistry) -> None:
    _register(registry, LSET_COMMAND, validate_lset, execute_lset, is_write=True)


def validate_lset(args: List[str]) -> None:
    if len(args) < 3:
        raise CommandError(f"expected 3 argument, got {len(args)}")


@_error_as_reply
def execute_lset(args: List[str], store: Any) -> str:
    index = _atoi(args[1])
    store.lset(args[0], index, " ".join(args[2:]))
    return "OK\n"


# RPOP

def register_rpop_command(registry: CommandRegistry) -> None:
    _register(registry, RPOP_COMMAND, validate_lpop, execute_rpop, is_write=True)


@_error_as_reply
def execute_rpop(args: List[str], store: Any) -> str:
    return store.rpop(args[0], _atoi(args[1]))


# RPUSH

def register_rpush_command(registry: CommandRegistry) -> None:
    _register(registry, RPUSH_COMMAND, validate_lpush, execute_rpush, is_write=True)


@_error_as_reply
def execute_rpush(args: List[str], store: Any) -> str:
    store.rpush(args)
    return "OK\n"