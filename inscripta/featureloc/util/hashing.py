"""
Perform MD5 digests of arbitrary objects in memory in python. All objects are unpacked and their string representations
are digested.
"""
import hashlib
from typing import Any, Iterable
from uuid import UUID


def _encode_object_for_digest(*args: Any) -> Iterable[str]:
    """
    Inner function for :meth:`digest_object()` that produces the string representations. This helps with debugging.

    Lists and tuples are unpacked recursively and delimited so that ``[["a", "b"]]`` and ``["a", "b"]`` produce
    different digests. ``None`` is encoded distinctly from the string ``"None"``.
    """
    for member in args:
        if isinstance(member, (list, tuple)):
            yield "["
            yield from _encode_object_for_digest(*member)
            yield "]"
        elif member is None:
            yield "\x00"
        else:
            yield str(member)
        yield "\x1f"


def digest_object(*args: Any) -> UUID:
    """MD5 digest of any arbitrary set of python objects. Must be utf-8 encodeable.

    Args can be any set of objects with stable string representations, including nested lists and tuples.
    Order is significant.
    """
    hasher = hashlib.md5()
    for val in _encode_object_for_digest(*args):
        hasher.update(val.encode("utf-8"))
    return UUID(hasher.hexdigest())
