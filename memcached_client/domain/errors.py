"""Library-defined failure raised by the memcached client.

``MemcachedError`` is public so callers can catch and inspect it, but only
code inside ``memcached_client`` creates it, through :func:`_create_error`.
Unpickling and copying rebuild it through :func:`_restore`.
"""
from typing import Any, Mapping, final

from memcached_client.core.logging import get_logger

logger = get_logger(__name__)

# Held only by this module; direct construction without it is rejected
_CONSTRUCTION_KEY = object()

_FROZEN_ATTRIBUTES = frozenset({"message", "_message", "args"})


@final
class MemcachedError(Exception):
    """A failure detected by the memcached client itself.

    Distinguished from other failures by type alone: there is no error code,
    no cause chain and no field beyond the diagnostic message.

    Example:
        >>> try:
        ...     client_operation()
        ... except MemcachedError as e:
        ...     print(e.message)
    """

    def __init__(self, message: str, *, _key: object = None):
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                "MemcachedError is raised by memcached_client and cannot be "
                "constructed directly"
            )
        _check_message(message)
        super().__init__(message)
        _freeze_message(self, message)

    def __init_subclass__(cls, **kwargs):
        raise TypeError("MemcachedError cannot be subclassed")

    @property
    def message(self) -> str:
        """Human-readable diagnostic message."""
        return self._message

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FROZEN_ATTRIBUTES:
            raise AttributeError(f"MemcachedError.{name} is read-only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _FROZEN_ATTRIBUTES:
            raise AttributeError(f"MemcachedError.{name} is read-only")
        super().__delattr__(name)

    def __reduce__(self):
        return _restore, ({"message": self._message},)

    def __str__(self) -> str:
        return self._message


def _check_message(message: Any) -> None:
    if not isinstance(message, str):
        raise TypeError(
            f"MemcachedError message must be str, got {type(message).__name__}"
        )


def _freeze_message(error: MemcachedError, message: str) -> None:
    # Kept apart from args, which BaseException.__init__ can rewrite
    object.__setattr__(error, "_message", message)


def _create_error(message: str) -> MemcachedError:
    """Create a MemcachedError for a condition detected inside the library.

    Internal use only. Callers raise the result at the point of detection
    and let it propagate unchanged.

    Args:
        message: Diagnostic message explaining the failure

    Returns:
        New MemcachedError whose message equals ``message``

    Raises:
        TypeError: If message is not a string

    Example:
        >>> raise _create_error("unexpected response terminator")
    """
    error = MemcachedError(message, _key=_CONSTRUCTION_KEY)
    logger.debug(f"MemcachedError created: {message}", extra={"error_type": "MemcachedError"})
    return error


def _restore(record: Mapping[str, Any]) -> MemcachedError:
    """Rebuild a MemcachedError from its serialized record.

    Called by pickle and copy through ``MemcachedError.__reduce__``.

    Args:
        record: Mapping holding at least a ``"message"`` string

    Returns:
        Equivalent MemcachedError

    Raises:
        TypeError: If the record is not a mapping or lacks a string message
    """
    if not isinstance(record, Mapping) or "message" not in record:
        raise TypeError("MemcachedError record must be a mapping with a 'message' field")

    message = record["message"]
    _check_message(message)

    error = Exception.__new__(MemcachedError)
    Exception.__init__(error, message)
    _freeze_message(error, message)
    return error
