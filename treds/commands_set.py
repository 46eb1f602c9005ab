"""Commands on sets: SADD, SREM, membership and set algebra."""

from __future__ import annotations

from typing import Any, List

from .commands_kv import _error_as_reply, _expect_at_least, _expect_exactly, _register
from .registry import CommandError, CommandRegistry

SADD_COMMAND = "SADD"
SCARD_COMMAND = "SCARD"
SDIFF_COMMAND = "SDIFF"
SINTER_COMMAND = "SINTER"
SISMEMBER_COMMAND = "SISMEMBER"
SMEMBERS_COMMAND = "SMEMBERS"
SREM_COMMAND = "SREM"
SUNION_COMMAND = "SUNION"


# SADD

def register_sadd_command(registry: CommandRegistry) -> None:
    _register(registry, SADD_COMMAND, validate_sadd, execute_sadd, is_write=True)


def validate_sadd(args: List[str]) -> None:
    _expect_at_least(args, 2)


@_error_as_reply
def execute_sadd(args: List[str], store: Any) -> str:
    store.sadd(args[0], args[1:])
    return "OK\n"


# SCARD

def register_scard_command(registry: CommandRegistry) -> None:
    _register(registry, SCARD_COMMAND, validate_scard, execute_scard)


def validate_scard(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_scard(args: List[str], store: Any) -> str:
    return str(store.scard(args[0]))


# SDIFF

def register_sdiff_command(registry: CommandRegistry) -> None:
    _register(registry, SDIFF_COMMAND, validate_sdiff, execute_sdiff)


def validate_sdiff(args: List[str]) -> None:
    _expect_at_least(args, 1)


@_error_as_reply
def execute_sdiff(args: List[str], store: Any) -> str:
    return store.sdiff(args)


# SINTER

def register_sinter_command(registry: CommandRegistry) -> None:
    _register(registry, SINTER_COMMAND, validate_sinter, execute_sinter)


def validate_sinter(args: List[str]) -> None:
    _expect_at_least(args, 1)


@_error_as_reply
def execute_sinter(args: List[str], store: Any) -> str:
    return store.sinter(args)


# SISMEMBER

def register_sismember_command(registry: CommandRegistry) -> None:
    _register(registry, SISMEMBER_COMMAND, validate_sismember, execute_sismember)


def validate_sismember(args: List[str]) -> None:
    if len(args) < 2:
        raise CommandError(f"expected 2 argument, got {len(args)}")


@_error_as_reply
def execute_sismember(args: List[str], store: Any) -> str:
    key = args[0]
    member = " ".join(args[1:])
    found = store.sismember(key, member)
    if found:
        return "1"
    return "0"


# SMEMBERS

def register_smembers_command(registry: CommandRegistry) -> None:
    _register(registry, SMEMBERS_COMMAND, validate_smembers, execute_smembers)


def validate_smembers(args: List[str]) -> None:
    _expect_exactly(args, 1)


@_error_as_reply
def execute_smembers(args: List[str], store: Any) -> str:
    return store.smembers(args[0])


# SREM

def register_srem_command(registry: CommandRegistry) -> None:
    _register(registry, SREM_COMMAND, validate_sadd, execute_srem, is_write=True)


@_error_as_reply
def execute_srem(args: List[str], store: Any) -> str:
    store.srem(args[0], args[1:])
    return "OK\n"


# SUNION

def register_sunion_command(registry: CommandRegistry) -> None:
    _register(registry, SUNION_COMMAND, validate_sunion, execute_sunion)


def validate_sunion(args: List[str]) -> None:
    _expect_at_least(args, 1)


@_error_as_reply
def execute_sunion(args: List[str], store: Any) -> str:
    return store.sunion(args)