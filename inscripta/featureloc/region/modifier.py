"""
Modifiers resize a span relative to its head and/or tail. The text form uses ``^`` for the head and ``$`` for the
tail, each optionally followed by a signed offset. A pair of anchors joined by ``..`` moves both ends.

Only the canonical form of an offset is accepted: a sign followed by a number without leading zeros. A zero offset
is written as the bare anchor, so ``^5``, ``^+0`` and ``$-05`` are all rejected.
"""
import re
from abc import ABC, abstractmethod
from typing import Tuple

from inscripta.featureloc import AbstractModifier
from inscripta.featureloc.exc import ModifierSyntaxError

HEAD_SIGIL = "^"
TAIL_SIGIL = "$"
RANGE_DELIMITER = ".."

_ANCHOR_REGEX = re.compile(r"([\^$])([+-][1-9]\d*)?")


class Modifier(AbstractModifier, ABC):
    """Abstract resize operation on a ``(head, tail)`` pair.

    Spans running backwards (``tail < head``) are resized in mirrored coordinates, so that offsets are always
    measured in reading direction.
    """

    def apply(self, head: int, tail: int) -> Tuple[int, int]:
        if tail < head:
            head, tail = self._apply_forward(-head, -tail)
            return -head, -tail
        return self._apply_forward(head, tail)

    @abstractmethod
    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        """Resizes a span with ``head <= tail``"""

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, str(self))


class _SingleModifier(Modifier, ABC):
    """Collapses a span onto one of its ends, shifted by ``offset``"""

    sigil: str

    def __init__(self, offset: int = 0):
        self.offset = offset

    def __eq__(self, other):
        return type(other) is type(self) and self.offset == other.offset

    def __hash__(self):
        return hash((type(self).__name__, self.offset))

    def __str__(self):
        if self.offset == 0:
            return self.sigil
        return "{}{:+d}".format(self.sigil, self.offset)


class _PairModifier(Modifier, ABC):
    """Moves both ends of a span. ``head`` and ``tail`` are offsets from the anchors named by the class."""

    def __init__(self, head: int = 0, tail: int = 0):
        self.head = head
        self.tail = tail

    def __eq__(self, other):
        return type(other) is type(self) and self.head == other.head and self.tail == other.tail

    def __hash__(self):
        return hash((type(self).__name__, self.head, self.tail))


class Head(_SingleModifier):
    """Collapses a span onto its head, offset by the value given"""

    sigil = HEAD_SIGIL

    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        head += self.offset
        return head, head

    def complement(self) -> "Tail":
        return Tail(-self.offset)


class Tail(_SingleModifier):
    """Collapses a span onto its tail, offset by the value given"""

    sigil = TAIL_SIGIL

    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        tail += self.offset
        return tail, tail

    def complement(self) -> Head:
        return Head(-self.offset)


class HeadTail(_PairModifier):
    """Offsets the head and the tail of a span independently"""

    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        head += self.head
        tail += self.tail
        return head, max(head, tail)

    def complement(self) -> "HeadTail":
        return HeadTail(-self.tail, -self.head)

    def __str__(self):
        return "{}{}{}".format(Head(self.head), RANGE_DELIMITER, Tail(self.tail))


class HeadHead(_PairModifier):
    """Builds a span from two offsets measured from the head"""

    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        tail = head + self.tail
        head += self.head
        return head, max(head, tail)

    def complement(self) -> "TailTail":
        return TailTail(-self.tail, -self.head)

    def __str__(self):
        return "{}{}{}".format(Head(self.head), RANGE_DELIMITER, Head(self.tail))


class TailTail(_PairModifier):
    """Builds a span from two offsets measured from the tail"""

    def _apply_forward(self, head: int, tail: int) -> Tuple[int, int]:
        head = tail + self.head
        tail += self.tail
        return head, max(head, tail)

    def complement(self) -> HeadHead:
        return HeadHead(-self.tail, -self.head)

    def __str__(self):
        return "{}{}{}".format(Tail(self.head), RANGE_DELIMITER, Tail(self.tail))


# Legal anchor pairings, in the order they are attempted.
_PAIR_TYPES = {
    (HEAD_SIGIL, TAIL_SIGIL): HeadTail,
    (HEAD_SIGIL, HEAD_SIGIL): HeadHead,
    (TAIL_SIGIL, TAIL_SIGIL): TailTail,
}


def _parse_anchor(text: str, pos: int) -> Tuple[str, int, int]:
    match = _ANCHOR_REGEX.match(text, pos)
    if not match:
        raise ModifierSyntaxError(text, pos, "expected '^' or '$'")
    offset = int(match.group(2)) if match.group(2) else 0
    return match.group(1), offset, match.end()


def parse_modifier(text: str) -> Modifier:
    """Interprets the given text as a Modifier.

    Parameters
    ----------
    text
        One of ``^``, ``$`` or a pair ``A..B`` of them, each anchor optionally followed by a signed offset.

    Raises
    ------
    ModifierSyntaxError
        If the whole text is not a modifier.
    """
    first_sigil, first_offset, pos = _parse_anchor(text, 0)
    if text.startswith(RANGE_DELIMITER, pos):
        second_pos = pos + len(RANGE_DELIMITER)
        second_sigil, second_offset, end = _parse_anchor(text, second_pos)
        pair_type = _PAIR_TYPES.get((first_sigil, second_sigil))
        if pair_type is None:
            raise ModifierSyntaxError(text, second_pos, "a tail anchor cannot be followed by a head anchor")
        if end != len(text):
            raise ModifierSyntaxError(text, end)
        return pair_type(first_offset, second_offset)
    if pos != len(text):
        raise ModifierSyntaxError(text, pos)
    if first_sigil == HEAD_SIGIL:
        return Head(first_offset)
    return Tail(first_offset)
