"""Memcached client library.

Exposes the library-defined failure type, ``MemcachedError``, which callers
catch to tell client failures apart from unrelated faults.
"""
import logging

# Silent until the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from memcached_client.domain.errors import MemcachedError  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "MemcachedError",
    "__version__",
]
