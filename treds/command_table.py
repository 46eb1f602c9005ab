"""The full set of commands the server registers."""

from __future__ import annotations

from .commands_hash import (
    register_hdel_command,
    register_hexists_command,
    register_hget_command,
    register_hgetall_command,
    register_hkeys_command,
    register_hlen_command,
    register_hset_command,
    register_hvals_command,
)
from .commands_kv import (
    register_db_size_command,
    register_delete_command,
    register_delete_prefix_command,
    register_expire_command,
    register_flush_all_command,
    register_get_command,
    register_keys_command,
    register_kvs_command,
    register_longest_prefix_command,
    register_mget_command,
    register_mset_command,
    register_ping_command,
    register_scan_keys_command,
    register_scan_kvs_command,
    register_set_command,
    register_ttl_command,
)
from .commands_list import (
    register_lindex_command,
    register_llen_command,
    register_lpop_command,
    register_lpush_command,
    register_lrange_command,
    register_lrem_command,
    register_lset_command,
    register_rpop_command,
    register_rpush_command,
)
from .commands_set import (
    register_sadd_command,
    register_scard_command,
    register_sdiff_command,
    register_sinter_command,
    register_sismember_command,
    register_smembers_command,
    register_srem_command,
    register_sunion_command,
)
from .commands_zset import (
    register_zadd_command,
    register_zcard_command,
    register_zrange_lex_keys_command,
    register_zrange_lex_kvs_command,
    register_zrange_score_keys_command,
    register_zrange_score_kvs_command,
    register_zrem_command,
    register_zrevrange_lex_keys_command,
    register_zrevrange_lex_kvs_command,
    register_zrevrange_score_keys_command,
    register_zrevrange_score_kvs_command,
    register_zscore_command,
)
from .registry import CommandRegistry

_REGISTRATIONS = (
    register_ping_command,
    register_get_command,
    register_set_command,
    register_mset_command,
    register_delete_command,
    register_scan_kvs_command,
    register_scan_keys_command,
    register_delete_prefix_command,
    register_keys_command,
    register_kvs_command,
    register_mget_command,
    register_db_size_command,
    register_zadd_command,
    register_zrange_lex_kvs_command,
    register_zrange_lex_keys_command,
    register_zrange_score_keys_command,
    register_zrange_score_kvs_command,
    register_zrem_command,
    register_zscore_command,
    register_zcard_command,
    register_zrevrange_score_keys_command,
    register_zrevrange_score_kvs_command,
    register_zrevrange_lex_keys_command,
    register_zrevrange_lex_kvs_command,
    register_flush_all_command,
    register_lpush_command,
    register_rpush_command,
    register_lpop_command,
    register_rpop_command,
    register_lrem_command,
    register_lset_command,
    register_lrange_command,
    register_llen_command,
    register_lindex_command,
    register_sadd_command,
    register_srem_command,
    register_smembers_command,
    register_sismember_command,
    register_scard_command,
    register_sunion_command,
    register_sinter_command,
    register_sdiff_command,
    register_hset_command,
    register_hget_command,
    register_hgetall_command,
    register_hlen_command,
    register_hdel_command,
    register_hexists_command,
    register_hkeys_command,
    register_hvals_command,
    register_expire_command,
    register_ttl_command,
    register_longest_prefix_command,
)


def register_commands(registry: CommandRegistry) -> None:
    """Register every server command in the given registry."""
    for register in _REGISTRATIONS:
        register(registry)