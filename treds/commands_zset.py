"""Commands on sorted maps: ZADD, ZREM, scores and range queries."""

from __future__ import annotations

from typing import Any, List, Tuple

from .commands_kv import MAX_INT64, _error_as_reply, _register
from .registry import CommandError, CommandRegistry

ZADD_COMMAND = "ZADD"
ZCARD_COMMAND = "ZCARD"
ZRANGELEXKEYS = "ZRANGELEXKEYS"
ZRANGELEXKVS = "ZRANGELEXKVS"
ZRANGESCOREKEYS = "ZRANGESCOREKEYS"
ZRANGESCOREKVS = "ZRANGESCOREKVS"
ZREM_COMMAND = "ZREM"
ZREVRANGELEXKEYS = "ZREVRANGELEXKEYS"
ZREVRANGELEXKVS = "ZREVRANGELEXKVS"
ZREVRANGESCOREKEYS = "ZREVRANGESCOREKEYS"
ZREVRANGESCOREKVS = "ZREVRANGESCOREKVS"
ZSCORE_COMMAND = "ZSCORE"

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise CommandError(f'parsing "{text}": invalid syntax')


def _parse_bool_or_false(text: str) -> bool:
    try:
        return _parse_bool(text)
    except CommandError:
        return False


def _lex_args(args: List[str]) -> Tuple[str, str, str, str, str, bool]:
    count = args[2] if len(args) > 2 else str(MAX_INT64)
    with_score = _parse_bool_or_false(args[3]) if len(args) > 3 else True
    min_key = args[4] if len(args) > 4 else ""
    max_key = args[5] if len(args) > 5 else ""
    return args[0], args[1], min_key, max_key, count, with_score


def _score_args(args: List[str]) -> Tuple[str, str, str, str, str, bool]:
    start_index = args[3] if len(args) > 4 else "0"
    count = args[4] if len(args) > 5 else str(MAX_INT64)
    with_score = _parse_bool(args[5]) if len(args) > 5 else True
    return args[0], args[1], args[2], start_index, count, with_score


# ZADD

def register_zadd_command(registry: CommandRegistry) -> None:
    _register(registry, ZADD_COMMAND, validate_zadd, execute_zadd, is_write=True)


def validate_zadd(args: List[str]) -> None:
    if len(args) < 3:
        raise CommandError(f"expected 3 or multiple of 3 arguments, got {len(args)}")


@_error_as_reply
def execute_zadd(args: List[str], store: Any) -> str:
    store.zadd(args)
    return "OK\n"


# ZCARD

def register_zcard_command(registry: CommandRegistry) -> None:
    _register(registry, ZCARD_COMMAND, validate_zcard, execute_zcard)


def validate_zcard(args: List[str]) -> None:
    if not args:
        raise CommandError(f"expected 1 argument, got {len(args)}")


@_error_as_reply
def execute_zcard(args: List[str], store: Any) -> str:
    return str(store.zcard(args[0]))


# Lexicographic ranges

def validate_zrange_lex(args: List[str]) -> None:
    if len(args) < 2:
        raise CommandError(f"expected minimum 2 argument, got {len(args)}")
    if len(args) > 6:
        raise CommandError(f"expected maximum 3 argument, got {len(args)}")


def register_zrange_lex_keys_command(registry: CommandRegistry) -> None:
    _register(registry, ZRANGELEXKEYS, validate_zrange_lex, execute_zrange_lex_keys)


@_error_as_reply
def execute_zrange_lex_keys(args: List[str], store: Any) -> str:
    return store.zrange_by_lex_keys(*_lex_args(args))


def register_zrange_lex_kvs_command(registry: CommandRegistry) -> None:
    _register(registry, ZRANGELEXKVS, validate_zrange_lex, execute_zrange_lex_kvs)


@_error_as_reply
def execute_zrange_lex_kvs(args: List[str], store: Any) -> str:
    return store.zrange_by_lex_kvs(*_lex_args(args))


def register_zrevrange_lex_keys_command(registry: CommandRegistry) -> None:
    _register(
        registry, ZREVRANGELEXKEYS, validate_zrange_lex, execute_zrevrange_lex_keys
    )


@_error_as_reply
def execute_zrevrange_lex_keys(args: List[str], store: Any) -> str:
    return store.zrevrange_by_lex_keys(*_lex_args(args))


def register_zrevrange_lex_kvs_command(registry: CommandRegistry) -> None:
    _register(registry, ZREVRANGELEXKVS, validate_zrange_lex, execute_zrevrange_lex_kvs)


@_error_as_reply
def execute_zrevrange_lex_kvs(args: List[str], store: Any) -> str:
    return store.zrevrange_by_lex_kvs(*_lex_args(args))


# Score ranges

def validate_zrange_score(args: List[str]) -> None:
    if len(args) < 3:
        raise CommandError(f"expected minimum 3 argument, got {len(args)}")
    if len(args) > 6:
        raise CommandError(f"expected maximum 6 argument, got {len(args)}")


def register_zrange_score_keys_command(registry: CommandRegistry) -> None:
    _register(
        registry, ZRANGESCOREKEYS, validate_zrange_score, execute_zrange_score_keys
    )


@_error_as_reply
def execute_zrange_score_keys(args: List[str], store: Any) -> str:
    return store.zrange_by_score_keys(*_score_args(args))


def register_zrange_score_kvs_command(registry: CommandRegistry) -> None:
    _register(registry, ZRANGESCOREKVS, validate_zrange_score, execute_zrange_score_kvs)


@_error_as_reply
def execute_zrange_score_kvs(args: List[str], store: Any) -> str:
    return store.zrange_by_score_kvs(*_score_args(args))


def register_zrevrange_score_keys_command(registry: CommandRegistry) -> None:
    _register(
        registry,
        ZREVRANGESCOREKEYS,
        validate_zrange_score,
        execute_zrevrange_score_keys,
    )


@_error_as_reply
def execute_zrevrange_score_keys(args: List[str], store: Any) -> str:
    return store.zrevrange_by_score_keys(*_score_args(args))


def register_zrevrange_score_kvs_command(registry: CommandRegistry) -> None:
    _register(
        registry,
        ZREVRANGESCOREKVS,
        validate_zrange_score,
        execute_zrevrange_score_kvs,
    )


@_error_as_reply
def execute_zrevrange_score_kvs(args: List[str], store: Any) -> str:
    return store.zrevrange_by_score_kvs(*_score_args(args))


# ZREM

def register_zrem_command(registry: CommandRegistry) -> None:
    _register(registry, ZREM_COMMAND, validate_zrem, execute_zrem, is_write=True)


def validate_zrem(args: List[str]) -> None:
    if len(args) < 2:
        raise CommandError(f"expected 3 or multiple of 2 arguments, got {len(args)}")


@_error_as_reply
def execute_zrem(args: List[str], store: Any) -> str:
    store.zrem(args)
    return "OK\n"


# ZSCORE

def register_zscore_command(registry: CommandRegistry) -> None:
    _register(registry, ZSCORE_COMMAND, validate_zscore, execute_zscore)


def validate_zscore(args: List[str]) -> None:
    if len(args) != 2:
        raise CommandError(f"expected  2 arguments, got {len(args)}")


@_error_as_reply
def execute_zscore(args: List[str], store: Any) -> str:
    return store.zscore(args)