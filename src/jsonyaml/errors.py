"""Error taxonomy for jsonyaml.

Every failure raised by the library derives from YAMLCodecError, so callers
can catch one class. EndOfStream is deliberately outside that hierarchy: it
marks the normal end of a multi-document stream, not a failure.
"""

from typing import Any, Dict, List, Optional


class YAMLCodecError(ValueError):
    """Base class for all jsonyaml errors."""


class ParseError(YAMLCodecError):
    """Raised when block-format or JSON text is malformed."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        super().__init__(message)


class DuplicateKeyError(YAMLCodecError):
    """Raised when a mapping defines the same canonical key twice."""

    def __init__(self, key: str, line: Optional[int] = None):
        self.key = key
        self.line = line
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f'{prefix}key "{key}" already defined')


class UnknownFieldError(YAMLCodecError):
    """Raised in strict mode when an input key matches no field of the target type."""

    def __init__(self, key: str, type_name: str, path: str = ""):
        self.key = key
        self.type_name = type_name
        self.path = path
        where = f" (at {path})" if path else ""
        super().__init__(f'unknown field "{key}" in {type_name}{where}')


class ConversionError(YAMLCodecError):
    """Raised when a value cannot be represented in the strict tree."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{message} (at {path})" if path else message)


class BindError(YAMLCodecError):
    """Raised when the typed binder rejects a converted tree."""

    def __init__(self, type_name: str, errors: List[Dict[str, Any]], message: str):
        self.type_name = type_name
        self.errors = errors
        super().__init__(f"cannot bind {type_name}: {message}")


class EndOfStream(EOFError):
    """Signals that a stream decoder has no more documents."""
