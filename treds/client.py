"""Interactive command-line client for a Treds server."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import time
from dataclasses import dataclass
from typing import BinaryIO, Iterable, List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.styles import Style

DEFAULT_PORT = "7997"
DEFAULT_HOST = "localhost"


@dataclass(frozen=True)
class Suggestion:
    """A command name offered for completion, with a short description."""

    text: str
    description: str


SUGGESTIONS = (
    Suggestion("DBSIZE", "Get number of keys in the db"),
    Suggestion("DEL", "DEL key - Delete a key"),
    Suggestion("DELPREFIX", "DELPREFIX prefix - Delete all keys having a common prefix. Returns number of keys deleted"),
    Suggestion("EXPIRE", "EXPIRE key seconds - Expire key after given seconds"),
    Suggestion("FLUSHALL", "FLUSHALL - Deletes all keys"),
    Suggestion("GET", "GET key - Get a value for a key"),
    Suggestion("HDEL", "HDEL key field [field ...] - Deletes the fields present inside the hash at the key"),
    Suggestion("HEXISTS", "HEXISTS key field - Returns a true or false based on field is present in hash at key or not"),
    Suggestion("HGET", "HGET key field - Returns the value present at field inside the hash at key"),
    Suggestion("HGETALL", "HGETALL key - Returns all field value pairs inside the hash at the key"),
    Suggestion("HKEYS", "HKEYS key - Returns all field present in the hash at key"),
    Suggestion("HLEN", "HLEN key - Returns the size of hash at the key"),
    Suggestion("HSET", "HSET key field value [field value ...] - Sets field value pairs in the hash with key"),
    Suggestion("HVALS", "HVALS key - Returns all values present in the hash at key"),
    Suggestion("KEYS", "KEYS cursor regex count - Returns count number of keys matching a regex in lex order starting with cursor. Count is optional. Last element is the next cursor"),
    Suggestion("KVS", "KVS cursor regex count - Returns count number of keys/values in which keys match a regex in lex order starting with cursor. Count is optional. Last element is the next cursor"),
    Suggestion("LINDEX", "LINDEX key index - Returns the element at index of list with key"),
    Suggestion("LLEN", "LLEN key - Returns the length of list with key"),
    Suggestion("LNGPREFIX", "LNGPREFIX string - Returns the key value pair in which key is the longest prefix of given string"),
    Suggestion("LPOP", "LPOP key count - Removes count elements from left of list with key and returns the popped elements"),
    Suggestion("LPUSH", "LPUSH key element [element ...] - Adds elements to the left of list with key"),
    Suggestion("LRANGE", "LRANGE key start stop - Returns the elements from start index to stop index in the list with key"),
    Suggestion("LREM", "LREM key index - Removes element at index of list with key"),
    Suggestion("LSET", "LSET key index element - Sets an element at an index of a list with key"),
    Suggestion("MGET", "MGET key1 [key2 key3 ....]- Get values for multiple keys"),
    Suggestion("MSET", "MSET key1 value1 [key2 value2 key3 value3 ....]- Set values for multiple keys"),
    Suggestion("PING", "PING - Replies with a PONG"),
    Suggestion("RESTORE", "RESTORE folder_path - Restores data from a file to in-mem store"),
    Suggestion("RPOP", "RPOP key count - Removes count elements from right of list with key and returns the popped elements"),
    Suggestion("RPUSH", "RPUSH key element [element ...] - Adds elements to the right of list with key"),
    Suggestion("SADD", "SADD key member [member ...] - Adds the members to a set with key"),
    Suggestion("SCANKEYS", "SCANKEYS cursor prefix count - Returns the count number of keys matching prefix starting from an index in lex order only present in Key/Value Store. Last element is the next cursor"),
    Suggestion("SCANKVS", "SCANKVS cursor prefix count - Returns the count number of keys/value pair in which keys match prefix starting from an index in lex order only present in Key/Value Store. Last element is the next cursor"),
    Suggestion("SCARD", "SCARD key - Returns the size of the set with key"),
    Suggestion("SDIFF", "SDIFF key [key ...] - Returns the difference between the first set and all the successive sets"),
    Suggestion("SET", "SET key value - Sets a key value pair"),
    Suggestion("SINTER", "SINTER key [key ...] - Returns the intersection of sets with the given keys"),
    Suggestion("SISMEMBER", "SISMEMBER key member - Return 1 if member is present in set with key, 0 otherwise"),
    Suggestion("SMEMBERS", "SMEMBERS key - Returns all members of a set with key"),
    Suggestion("SNAPSHOT", "SNAPSHOT Creates a current db snapshot and persists on dist"),
    Suggestion("SREM", "SREM key member [member ...] - Removes the members from a set with key"),
    Suggestion("SUNION", "SUNION key [key ...] - Returns the union of sets with the give keys"),
    Suggestion("TTL", "TTL key - Returns the time in seconds remaining before key expires. -1 if key has no expiry, -2 if key is not present"),
    Suggestion("ZADD", "ZADD key score member_key member_value [score member_key member_value ....] - Add member_key with member value with score to a sorted map in key"),
    Suggestion("ZCARD", "ZCARD key - Returns the count of key/value pairs in sorted map in key"),
    Suggestion("ZRANGELEXKEYS", "ZRANGELEXKEYS key offset count withscore min max - Returns the count number of keys are greater than min and less than max starting from an index in a sorted map in lex order. WithScore can be true or false"),
    Suggestion("ZRANGELEXKVS", "ZRANGELEXKVS key offset count withscore min max - Returns the count number of key/value pair in which keys are greater than min and less than max starting from an index in a sorted map in lex order. WithScore can be true or false"),
    Suggestion("ZRANGESCOREKEYS", "ZRANGELEXKVS key offset count withscore min max - Returns the count number of key/value pair in which keys are greater than min and less than max starting from an index in a sorted map in lex order. WithScore can be true or false"),
    Suggestion("ZRANGESCOREKVS", "ZRANGESCOREKVS key min max offset count withscore - Returns the count number of key/value pair with the score between min/max in sorted order of score. WithScore can be true or false"),
    Suggestion("ZREM", "ZREM key member [member ...] - Removes a member from sorted map in key"),
    Suggestion("ZREVRANGELEXKEYS", "ZREVRANGELEXKEYS key offset count withscore min max - Returns the count number of keys are greater than min and less than max starting from an index in a sorted map in reverse lex order. WithScore can be true or false"),
    Suggestion("ZREVRANGELEXKVS", "ZREVRANGELEXKVS key offset count withscore min max - Returns the count number of key/value pair in which keys are greater than min and less than max starting from an index in a sorted map in reverse lex order. WithScore can be true or false"),
    Suggestion("ZREVRANGESCOREKEYS", "ZREVRANGESCOREKEYS key min max offset count withscore - Returns the count number of keys with the score between min/max in reverser sorted order of score. WithScore can be true or false"),
    Suggestion("ZREVRANGESCOREKVS", "ZREVRANGESCOREKVS key min max offset count withscore - Returns the count number of key/value pair with the score between min/max in reverse sorted order of score. WithScore can be true or false"),
    Suggestion("ZSCORE", "ZSCORE key member - Returns the score of a member in sorted map in key"),
    Suggestion("MULTI", "MULTI - Starts a transaction"),
    Suggestion("EXEC", "EXEC - Executes a transaction"),
    Suggestion("DISCARD", "DISCARD - Discards a transaction"),
)


def connect_to_treds(address: str) -> socket.socket:
    """Open a TCP connection to an address of the form host:port."""
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"address {address}: missing port in address")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"address {address}: invalid port") from None
    return socket.create_connection((host, port_number))


def send_command(conn, command: str) -> None:
    """Send a command line to the server as it was typed."""
    conn.sendall(command.encode("utf-8"))


def read_until_newline(reader: BinaryIO) -> str:
    """Read one line, newline included; raise EOFError if the stream ends first."""
    line = reader.readline()
    if not line.endswith(b"\n"):
        raise EOFError("stream ended before a newline")
    return line.decode("utf-8", "replace")


def read_fixed_bytes(reader: BinaryIO, n: int) -> bytes:
    """Read exactly n bytes; raise EOFError if the stream ends first."""
    data = bytearray()
    while len(data) < n:
        chunk = reader.read(n - len(data))
        if not chunk:
            raise EOFError(f"expected {n} bytes, got {len(data)}")
        data.extend(chunk)
    return bytes(data)


def read_all_data(conn: socket.socket) -> str:
    """Read one reply: a decimal length line, then that many bytes."""
    with conn.makefile("rb", buffering=0) as reader:
        length = read_until_newline(reader)
        size = int(length[:-1])
        return read_fixed_bytes(reader, size).decode("utf-8", "replace")


def suggest(text: str) -> List[Suggestion]:
    """Commands whose name starts with the first word of text, ignoring case."""
    first_word = text.split(" ")[0]
    if not first_word:
        return []
    wanted = first_word.upper()
    return [s for s in SUGGESTIONS if s.text.upper().startswith(wanted)]


class TredsCompleter(Completer):
    """Completes command names at the prompt."""

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        word = document.get_word_before_cursor(WORD=True)
        for item in suggest(document.text_before_cursor):
            yield Completion(
                item.text,
                start_position=-len(word),
                display_meta=item.description,
            )


_STYLE = Style.from_dict(
    {
        "prompt": "ansiyellow",
        "completion-menu.completion": "bg:ansiblack ansiyellow",
        "completion-menu.completion.current": "bg:ansiyellow ansiblack",
        "completion-menu.meta.completion": "bg:ansiblack ansiyellow",
        "scrollbar.background": "bg:ansiblack",
    }
)


def _format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:g}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:g}ms"
    return f"{seconds * 1e6:g}µs"


def _run_command(conn: socket.socket, command: str) -> None:
    start = time.perf_counter()
    try:
        send_command(conn, command)
    except OSError as err:
        print("Error sending command:", err)
        return
    try:
        response = read_all_data(conn)
    except (OSError, EOFError, ValueError) as err:
        print("Error reading response:", err)
        return
    print(response)
    print(f"Time taken: {_format_duration(time.perf_counter() - start)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Connect to a server and run the interactive prompt until Ctrl-D."""
    parser = argparse.ArgumentParser(description="Treds command-line client")
    parser.add_argument(
        "-port", "--port", default=DEFAULT_PORT, help="Port to connect on"
    )
    args = parser.parse_args(argv)

    host = os.environ.get("TREDS_HOST") or DEFAULT_HOST
    port = os.environ.get("TREDS_PORT") or DEFAULT_PORT
    if args.port:
        port = args.port

    try:
        conn = connect_to_treds(f"{host}:{port}")
    except (OSError, ValueError) as err:
        print("Error connecting to Treds:", err)
        return 1

    with conn:
        print("Connected to Treds. Type commands and press Enter.")
        print("Please use `Ctrl-D` to exit this program.")
        session: PromptSession = PromptSession(
            message=[("class:prompt", ">>> ")],
            completer=TredsCompleter(),
            style=_STYLE,
        )
        try:
            while True:
                try:
                    command = session.prompt()
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    break
                if command in ("", "\n"):
                    continue
                _run_command(conn, command)
        finally:
            print("Bye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())