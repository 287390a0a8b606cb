"""Enumerated settings and states for jsonyaml.

These constants prevent stringly-typed configuration and ensure
client code uses the correct values.
"""

from enum import Enum


class UnknownFieldPolicy(str, Enum):
    """What decoding does with input keys that match no target field."""

    IGNORE = "ignore"
    REJECT = "reject"


class StreamState(str, Enum):
    """Lifecycle of a multi-document decoder."""

    OPEN = "open"
    EXHAUSTED = "exhausted"
