"""
Reading and writing of the feature table location syntax. Text positions are 1-based and inclusive; Location
objects are 0-based and half-open.

The grammar is tried as an ordered list of alternatives, where the first alternative that matches wins:

    location   := range | order | join | complement | ambiguous | between | point
    range      := ["<"] INT ".." [">"] INT [">"]
    order      := "order(" location ("," location)* ")"
    join       := "join(" location ("," location)* ")"
    complement := "complement(" location ")"
    ambiguous  := INT "." INT
    between    := INT "^" INT
    point      := INT

A ``>`` following the end of a range is a legacy form of the 3' partial marker and is written before the end.
``INT`` has no leading zeros, so every accepted text is the canonical form of the Location it describes, apart from
that legacy marker.
"""
import re
from typing import Callable, List, Optional, Tuple

from inscripta.featureloc.exc import LocationSyntaxError
from inscripta.featureloc.location.location import Location
from inscripta.featureloc.location.location_impl import (
    Ambiguous,
    Between,
    Complemented,
    Joined,
    Ordered,
    Point,
    Ranged,
)

# Integers are written without leading zeros.
_INT = r"(?:[1-9]\d*|0(?!\d))"
_RANGE_REGEX = re.compile(rf"(<)?({_INT})\.\.(>)?({_INT})(>)?")
_AMBIGUOUS_REGEX = re.compile(rf"({_INT})\.({_INT})")
_BETWEEN_REGEX = re.compile(rf"({_INT})\^({_INT})")
_POINT_REGEX = re.compile(_INT)

_ParseResult = Optional[Tuple[Location, int]]


class _LocationParser:
    """Backtracking recursive descent parser. Each rule returns ``(location, next position)`` or None, and
    records the furthest position where a rule failed so that errors point at the offending text."""

    def __init__(self, text: str):
        self.text = text
        self.furthest = 0
        self.reason: Optional[str] = None

    def parse(self) -> Location:
        result = self.location(0)
        if result is None:
            raise LocationSyntaxError(self.text, self.furthest, self.reason)
        location, pos = result
        if pos != len(self.text):
            raise LocationSyntaxError(self.text, max(pos, self.furthest), self.reason)
        return location

    def _fail(self, pos: int, reason: Optional[str] = None) -> None:
        if pos > self.furthest or (pos == self.furthest and reason):
            self.furthest = pos
            self.reason = reason
        return None

    def location(self, pos: int) -> _ParseResult:
        for rule in (self.range, self.order, self.join, self.complement, self.ambiguous, self.between, self.point):
            result = rule(pos)
            if result is not None:
                return result
        return None

    def range(self, pos: int) -> _ParseResult:
        match = _RANGE_REGEX.match(self.text, pos)
        if not match:
            return self._fail(pos)
        start, end = int(match.group(2)) - 1, int(match.group(4))
        if start < 0 or end <= start:
            return self._fail(pos, "range end must not precede its start")
        partial3 = match.group(3) is not None or match.group(5) is not None
        return Ranged(start, end, match.group(1) is not None, partial3), match.end()

    def ambiguous(self, pos: int) -> _ParseResult:
        match = _AMBIGUOUS_REGEX.match(self.text, pos)
        if not match:
            return self._fail(pos)
        start, end = int(match.group(1)) - 1, int(match.group(2))
        if start < 0 or end <= start:
            return self._fail(pos, "ambiguous window end must not precede its start")
        return Ambiguous(start, end), match.end()

    def between(self, pos: int) -> _ParseResult:
        match = _BETWEEN_REGEX.match(self.text, pos)
        if not match:
            return self._fail(pos)
        left, right = int(match.group(1)), int(match.group(2))
        if right != left + 1:
            return self._fail(pos, "positions around '^' must be adjacent")
        return Between(left), match.end()

    def point(self, pos: int) -> _ParseResult:
        match = _POINT_REGEX.match(self.text, pos)
        if not match:
            return self._fail(pos, "expected a location")
        position = int(match.group(0)) - 1
        if position < 0:
            return self._fail(pos, "positions start at 1")
        return Point(position), match.end()

    def _operator(self, pos: int, keyword: str, build: Callable[[List[Location]], Location]) -> _ParseResult:
        prefix = keyword + "("
        if not self.text.startswith(prefix, pos):
            return self._fail(pos)
        pos += len(prefix)
        elements = []
        while True:
            result = self.location(pos)
            if result is None:
                return None
            element, pos = result
            elements.append(element)
            if self.text.startswith(",", pos):
                pos += 1
            elif self.text.startswith(")", pos):
                return build(elements), pos + 1
            else:
                return self._fail(pos, "expected ',' or ')'")

    def order(self, pos: int) -> _ParseResult:
        return self._operator(pos, "order", Ordered)

    def join(self, pos: int) -> _ParseResult:
        return self._operator(pos, "join", Joined)

    def complement(self, pos: int) -> _ParseResult:
        prefix = "complement("
        if not self.text.startswith(prefix, pos):
            return self._fail(pos)
        result = self.location(pos + len(prefix))
        if result is None:
            return None
        inner, pos = result
        if not self.text.startswith(")", pos):
            return self._fail(pos, "expected ')'")
        return Complemented(inner), pos + 1


def parse_location(text: str) -> Location:
    """Parses the text form of a Location.

    Parameters
    ----------
    text
        Location text such as ``join(<1..42,346..723)``. The whole text must be consumed.

    Raises
    ------
    LocationSyntaxError
        If the text is not a location. The error records the position of the offending text.
    """
    return _LocationParser(text).parse()


def format_location(location: Location) -> str:
    """Returns the canonical text form of a Location. ``parse_location(format_location(x)) == x``."""
    return str(location)
