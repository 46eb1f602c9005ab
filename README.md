# treds

Building blocks for an in-memory key/value server whose keyspace lives in a
radix tree, along with the server's command handlers and an interactive
command-line client.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

- `treds.radix_node` holds the tree's nodes (`Node`, `Edge`, `LeafNode`)
  and its ordered iterators (`Iterator`, `ReverseIterator`).
- `treds.radix_tree` holds `Tree` and its transaction `Txn`, plus
  `common_prefix_length`.
- `treds.registry` holds `CommandRegistry`, `CommandRegistration` and
  `CommandError`.
- `treds.commands_kv`, `treds.commands_hash`, `treds.commands_list`,
  `treds.commands_set` and `treds.commands_zset` hold the validation and
  execution hooks for each command and a `register_*_command` function for each.
- `treds.command_table.register_commands` fills a registry with every command.
- `treds.client` is the interactive client, started as `treds-cli`.

## The radix tree

Keys are bytes; `str` keys are encoded as UTF-8.

```python
from treds.radix_tree import Tree

tree = Tree()
tree, _, _ = tree.insert(b"user:1", "alice")
tree, _, _ = tree.insert(b"user:2", "bob")
tree, old, replaced = tree.insert(b"order:7", "book")

print(len(tree))            # 3
print(tree.get(b"user:1"))  # alice; a missing key raises KeyError
```

`Tree.insert` and `Tree.delete` return the new tree, the previous value and
whether one was there. `Tree.delete_prefix` returns the new tree and the
number of keys removed.

A transaction applies several changes and commits them as a tree:

```python
txn = tree.txn()
txn.insert(b"user:3", "carol")
removed = txn.delete_prefix(b"order:")   # 1
tree = txn.commit()
```

Changes are made in place on the tree's nodes, so keep working with the tree
returned by the most recent call rather than with an earlier one.

The root node, `tree.root`, offers the richer queries:

- `get(key)`, which raises `KeyError` for a missing key;
- `longest_prefix(key)`, which returns `(key, value)` for the longest stored
  key that is a prefix of `key`, or `None`;
- `minimum()` and `maximum()`;
- `walk(fn)`, `walk_backwards(fn)`, `walk_prefix(prefix, fn)` and
  `walk_path(path, fn)`, where `fn(key, value)` returning `True` stops the walk;
- `iterator()` and `reverse_iterator()`.

Leaves are linked in key order, so the iterators step from leaf to leaf:

```python
it = tree.root.iterator()
it.seek_prefix(b"user:")
print(list(it))   # [(b'user:1', 'alice'), (b'user:2', 'bob'), (b'user:3', 'carol')]

it = tree.root.iterator()
it.pattern_match(r"[13]$")
print([k for k, _ in it])   # [b'user:1', b'user:3']

print([k for k, _ in tree.root.reverse_iterator()])   # keys in descending order
```

## Commands

Commands are registered under their upper-case names and looked up in any
case:

```python
from treds.registry import CommandRegistry
from treds.command_table import register_commands

registry = CommandRegistry()
register_commands(registry)

ping = registry.retrieve("ping")
ping.validate([])
print(ping.execute([], None))   # PONG
print("get" in registry)        # True
```

Each `CommandRegistration` has a `name`, a `validate` hook, an `execute`
hook and an `is_write` flag. Adding a name twice, retrieving an unknown name,
or passing arguments a command does not accept raises `CommandError`.

The execution hooks take the argument list and a store object, and return the
reply text. The store is any object with the methods the commands call:
`size`, `get`, `set`, `mget`, `mset`, `delete`, `delete_prefix`, `expire`,
`flush_all`, `ttl`, `keys`, `kvs`, `prefix_scan_keys`, `prefix_scan`,
`longest_prefix`, `hset`, `hget`, `hgetall`, `hdel`, `hexists`, `hkeys`,
`hvals`, `hlen`, `lpush`, `rpush`, `lpop`, `rpop`, `lindex`, `llen`,
`lrange`, `lrem`, `lset`, `sadd`, `srem`, `smembers`, `sismember`, `scard`,
`sunion`, `sinter`, `sdiff`, `zadd`, `zrem`, `zscore`, `zcard`,
`zrange_by_lex_keys`, `zrange_by_lex_kvs`, `zrevrange_by_lex_keys`,
`zrevrange_by_lex_kvs`, `zrange_by_score_keys`, `zrange_by_score_kvs`,
`zrevrange_by_score_keys` and `zrevrange_by_score_kvs`. An exception raised
by the store becomes the reply text, as a server would send it back.

Registered commands: `PING`, `GET`, `SET`, `MGET`, `MSET`, `DEL`,
`DELPREFIX`, `KEYS`, `KVS`, `SCANKEYS`, `SCANKVS`, `LNGPREFIX`, `EXPIRE`,
`TTL`, `DBSIZE`, `FLUSHALL`, `HSET`, `HGET`, `HGETALL`, `HDEL`, `HEXISTS`,
`HKEYS`, `HVALS`, `HLEN`, `LPUSH`, `RPUSH`, `LPOP`, `RPOP`, `LINDEX`,
`LLEN`, `LRANGE`, `LREM`, `LSET`, `SADD`, `SREM`, `SMEMBERS`, `SISMEMBER`,
`SCARD`, `SUNION`, `SINTER`, `SDIFF`, `ZADD`, `ZREM`, `ZSCORE`, `ZCARD`,
`ZRANGELEXKEYS`, `ZRANGELEXKVS`, `ZRANGESCOREKEYS`, `ZRANGESCOREKVS`,
`ZREVRANGELEXKEYS`, `ZREVRANGELEXKVS`, `ZREVRANGESCOREKEYS` and
`ZREVRANGESCOREKVS`.

## The client

```
treds-cli
treds-cli --port 7997
```

The client connects to `TREDS_HOST` (default `localhost`) on the port given
by `--port` (or `-port`), which defaults to `7997`. Type a command and press
Enter. The client sends the line as typed, reads a reply framed as a decimal
length, a newline and then that many bytes, and prints the reply and the time
it took. Typing the start of a command name lists matching commands with a
short description of each. `Ctrl-D` leaves the client.

The framing helpers `connect_to_treds`, `send_command`,
`read_until_newline`, `read_fixed_bytes` and `read_all_data`, and `suggest`,
which lists the completions for a line, can be used on their own.

## What this package does not do

- There is no server. Nothing here listens for connections, parses incoming
  lines or dispatches them to the registered commands; `treds-cli` needs a
  server that speaks the framing above to be running already.
- There is no store. The command hooks call a store object that you supply;
  the package does not implement the strings, hashes, lists, sets, sorted maps
  or expiry behind them.
- There is no persistence, replication or transaction handling. The client
  offers `RESTORE`, `SNAPSHOT`, `MULTI`, `EXEC` and `DISCARD` for completion,
  but no such commands are registered here.