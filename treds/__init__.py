"""Radix tree, command registry and handlers, and a command-line client for a key/value server."""

__version__ = "0.1.0"