from typing import List, Optional, Sequence, Tuple, Union

from Bio.SeqFeature import (
    AfterPosition,
    BeforePosition,
    CompoundLocation,
    ExactPosition,
    SimpleLocation,
    WithinPosition,
)
from methodtools import lru_cache

from inscripta.featureloc.exc import LocationException
from inscripta.featureloc.location.location import Location, SortKey
from inscripta.featureloc.location.strand import Strand
from inscripta.featureloc.region.region import Region, Regions, Segment
from inscripta.featureloc.util.object_validation import ObjectValidation


class Between(Location):
    """A zero-length boundary between the bases at ``position - 1`` and ``position``"""

    def __init__(self, position: int):
        """
        Parameters
        ----------
        position
            0-based index of the boundary. ``Between(0)`` lies before the first base.
        """
        ObjectValidation.require_non_negative(position)
        self.position = position
        self.length = 0

    def __str__(self):
        return f"{self.position}^{self.position + 1}"

    def __repr__(self):
        return f"<Between {str(self)}>"

    def __eq__(self, other):
        if type(other) is not Between:
            return False
        return self.position == other.position

    def __hash__(self):
        return hash((Between, self.position))

    @property
    def is_contiguous(self) -> bool:
        return True

    @property
    def partial_count(self) -> int:
        return 0

    def sort_key(self) -> SortKey:
        return ((self.position, self.position, 0),)

    def region(self) -> Segment:
        return Segment(self.position, self.position)

    def complement(self) -> Location:
        return Complemented(self)

    def reverse(self, length: int) -> "Between":
        return Between(length - self.position)

    def normalize(self, length: int) -> "Between":
        return Between(self.position % length)

    def shift(self, at: int, n: int) -> "Between":
        if n == 0:
            return self
        if n > 0:
            return Between(self.position + n) if at <= self.position else self
        if self.position <= at:
            return self
        if self.position >= at - n:
            return Between(self.position + n)
        return Between(at)

    def expand(self, at: int, n: int) -> "Between":
        return self.shift(at, n)

    def crop(self, start: int, end: int) -> Optional["Between"]:
        if start <= self.position <= end:
            return Between(self.position - start)
        return None

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(ExactPosition(self.position), ExactPosition(self.position), Strand.PLUS.value)


class Point(Location):
    """A single base"""

    def __init__(self, position: int):
        """
        Parameters
        ----------
        position
            0-based index of the base
        """
        ObjectValidation.require_non_negative(position)
        self.position = position
        self.length = 1

    def __str__(self):
        return str(self.position + 1)

    def __repr__(self):
        return f"<Point {str(self)}>"

    def __eq__(self, other):
        if type(other) is not Point:
            return False
        return self.position == other.position

    def __hash__(self):
        return hash((Point, self.position))

    @property
    def is_contiguous(self) -> bool:
        return True

    @property
    def partial_count(self) -> int:
        return 0

    def sort_key(self) -> SortKey:
        return ((self.position, self.position + 1, 0),)

    def region(self) -> Segment:
        return Segment(self.position, self.position + 1)

    def complement(self) -> Location:
        return Complemented(self)

    def reverse(self, length: int) -> "Point":
        return Point(length - self.position - 1)

    def normalize(self, length: int) -> "Point":
        return Point(self.position % length)

    def _delete(self, at: int, n: int) -> Location:
        if self.position < at:
            return self
        if self.position >= at - n:
            return Point(self.position + n)
        return Between(at)

    def shift(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        if n < 0:
            return self._delete(at, n)
        return Point(self.position + n) if at <= self.position else self

    def expand(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        if n < 0:
            return self._delete(at, n)
        # A base sitting exactly at the insertion point stays put.
        return Point(self.position + n) if at < self.position else self

    def crop(self, start: int, end: int) -> Optional["Point"]:
        if start <= self.position < end:
            return Point(self.position - start)
        return None

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(ExactPosition(self.position), ExactPosition(self.position + 1), Strand.PLUS.value)


class Ranged(Location):
    """A half-open span of bases. Either end may be flagged partial, meaning the feature extends beyond the
    recorded boundary."""

    def __init__(self, start: int, end: int, partial5: bool = False, partial3: bool = False):
        """
        Parameters
        ----------
        start
            0-based start position
        end
            0-based exclusive end position. Must be greater than start.
        partial5
            True if the true start lies before ``start``
        partial3
            True if the true end lies after ``end``
        """
        ObjectValidation.require_positive_span(start, end)
        self.start = start
        self.end = end
        self.partial5 = partial5
        self.partial3 = partial3
        self.length = end - start

    def __str__(self):
        p5 = "<" if self.partial5 else ""
        p3 = ">" if self.partial3 else ""
        return f"{p5}{self.start + 1}..{p3}{self.end}"

    def __repr__(self):
        return f"<Ranged {str(self)}>"

    def __eq__(self, other):
        if type(other) is not Ranged:
            return False
        if self.start != other.start:
            return False
        if self.end != other.end:
            return False
        return self.partial5 == other.partial5 and self.partial3 == other.partial3

    def __hash__(self):
        return hash((Ranged, self.start, self.end, self.partial5, self.partial3))

    @property
    def is_contiguous(self) -> bool:
        return True

    @property
    def partial_count(self) -> int:
        return int(self.partial5) + int(self.partial3)

    def sort_key(self) -> SortKey:
        return ((self.start, self.end, self.partial_count),)

    def region(self) -> Segment:
        return Segment(self.start, self.end)

    def complement(self) -> Location:
        return Complemented(self)

    def reverse(self, length: int) -> "Ranged":
        return Ranged(length - self.end, length - self.start, self.partial3, self.partial5)

    def normalize(self, length: int) -> Location:
        if self.length >= length:
            return Ranged(0, length, self.partial5, self.partial3)
        start = self.start % length
        end = start + self.length
        if end <= length:
            return Ranged(start, end, self.partial5, self.partial3)
        return join(
            Ranged(start, length, self.partial5, False),
            Ranged(0, end - length, False, self.partial3),
        )

    def shift(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        if n < 0:
            return self._delete(at, -n)
        if self.end <= at:
            return self
        if at <= self.start:
            return Ranged(self.start + n, self.end + n, self.partial5, self.partial3)
        return join(
            Ranged(self.start, at, self.partial5, False),
            Ranged(at + n, self.end + n, False, self.partial3),
        )

    def expand(self, at: int, n: int) -> Location:
        return self.shift(at, n)

    def _delete(self, at: int, count: int) -> Location:
        stop = at + count
        if self.end <= at:
            return self
        if self.start >= stop:
            return Ranged(self.start - count, self.end - count, self.partial5, self.partial3)
        if at <= self.start and self.end <= stop:
            return Between(at)
        if self.start < at and stop < self.end:
            return Ranged(self.start, self.end - count, self.partial5, self.partial3)
        # One end was deleted: the surviving span no longer reaches the original boundary.
        if self.start >= at:
            return Ranged(at, self.end - count, True, self.partial3)
        return Ranged(self.start, at, self.partial5, True)

    def crop(self, start: int, end: int) -> Optional["Ranged"]:
        lower, upper = max(self.start, start), min(self.end, end)
        if lower >= upper:
            return None
        return Ranged(
            lower - start,
            upper - start,
            self.partial5 or lower > self.start,
            self.partial3 or upper < self.end,
        )

    def to_biopython(self) -> SimpleLocation:
        start = BeforePosition(self.start) if self.partial5 else ExactPosition(self.start)
        end = AfterPosition(self.end) if self.partial3 else ExactPosition(self.end)
        return SimpleLocation(start, end, Strand.PLUS.value)


class Ambiguous(Location):
    """A single base lying somewhere within ``[start, end)``"""

    def __init__(self, start: int, end: int):
        """
        Parameters
        ----------
        start
            0-based start of the window
        end
            0-based exclusive end of the window. Must be greater than start.
        """
        ObjectValidation.require_positive_span(start, end)
        self.start = start
        self.end = end
        self.length = 1

    def __str__(self):
        return f"{self.start + 1}.{self.end}"

    def __repr__(self):
        return f"<Ambiguous {str(self)}>"

    def __eq__(self, other):
        if type(other) is not Ambiguous:
            return False
        return self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((Ambiguous, self.start, self.end))

    @property
    def is_contiguous(self) -> bool:
        return True

    @property
    def partial_count(self) -> int:
        return 0

    def sort_key(self) -> SortKey:
        return ((self.start, self.end, 0),)

    def region(self) -> Segment:
        return Segment(self.start, self.end)

    def complement(self) -> Location:
        return Complemented(self)

    def reverse(self, length: int) -> "Ambiguous":
        return Ambiguous(length - self.end, length - self.start)

    def normalize(self, length: int) -> "Ambiguous":
        start = self.start % length
        return Ambiguous(start, min(start + self.end - self.start, length))

    def shift(self, at: int, n: int) -> Location:
        if n == 0 or self.end <= at:
            return self
        if n > 0:
            if at <= self.start:
                return Ambiguous(self.start + n, self.end + n)
            return Ambiguous(self.start, self.end + n)
        stop = at - n
        if self.start >= stop:
            return Ambiguous(self.start + n, self.end + n)
        if at <= self.start and self.end <= stop:
            return Between(at)
        start = self.start if self.start < at else at
        end = self.end + n if self.end > stop else at
        return Ambiguous(start, end)

    def expand(self, at: int, n: int) -> Location:
        return self.shift(at, n)

    def crop(self, start: int, end: int) -> Optional["Ambiguous"]:
        lower, upper = max(self.start, start), min(self.end, end)
        if lower >= upper:
            return None
        return Ambiguous(lower - start, upper - start)

    def to_biopython(self) -> SimpleLocation:
        return SimpleLocation(
            WithinPosition(self.start, left=self.start, right=self.end - 1),
            WithinPosition(self.end, left=self.start + 1, right=self.end),
            Strand.PLUS.value,
        )


class _ListLocation(Location):
    """Shared behavior of Locations built from a list of Locations"""

    operator: str

    def __init__(self, locations: Sequence[Location]):
        """
        Parameters
        ----------
        locations
            Non-empty list of Locations in reading order. Stored as given, without merging.
        """
        ObjectValidation.require_nonempty_locations(locations, type(self).__name__)
        ObjectValidation.require_all_have_type(locations, Location)
        self.locations: Tuple[Location, ...] = tuple(locations)
        self.length = sum(location.length for location in self.locations)

    def __str__(self):
        return "{}({})".format(self.operator, ",".join(str(location) for location in self.locations))

    def __repr__(self):
        return f"<{type(self).__name__} {str(self)}>"

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self.locations == other.locations

    def __hash__(self):
        return hash((type(self), self.locations))

    def __iter__(self):
        return iter(self.locations)

    @property
    def num_locations(self) -> int:
        return len(self.locations)

    @property
    def is_contiguous(self) -> bool:
        return False

    @property
    def partial_count(self) -> int:
        return sum(location.partial_count for location in self.locations)

    def sort_key(self) -> SortKey:
        return tuple(key for location in self.locations for key in location.sort_key())

    @lru_cache(maxsize=1)
    def region(self) -> Regions:
        return Regions(location.region() for location in self.locations)

    def complement(self) -> Location:
        return Complemented(self)

    def _crop_elements(self, start: int, end: int) -> List[Location]:
        cropped = (location.crop(start, end) for location in self.locations)
        return [location for location in cropped if location is not None]

    def to_biopython(self) -> Union[SimpleLocation, CompoundLocation]:
        parts = _biopython_parts(self)
        if len(parts) == 1:
            return parts[0]
        return CompoundLocation(parts, operator=self.operator)


class Joined(_ListLocation):
    """Locations physically concatenated to form one feature, such as the exons of a spliced transcript"""

    operator = "join"

    def reverse(self, length: int) -> "Joined":
        return Joined([location.reverse(length) for location in reversed(self.locations)])

    def normalize(self, length: int) -> Location:
        return join(*[location.normalize(length) for location in self.locations])

    def shift(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return join(*[location.shift(at, n) for location in self.locations])

    def expand(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return join(*[location.expand(at, n) for location in self.locations])

    def crop(self, start: int, end: int) -> Optional[Location]:
        cropped = self._crop_elements(start, end)
        return join(*cropped) if cropped else None


class Ordered(_ListLocation):
    """Locations grouped into one feature without being physically concatenated"""

    operator = "order"

    def reverse(self, length: int) -> "Ordered":
        return Ordered([location.reverse(length) for location in reversed(self.locations)])

    def normalize(self, length: int) -> "Ordered":
        return Ordered([location.normalize(length) for location in self.locations])

    def shift(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return Ordered([location.shift(at, n) for location in self.locations])

    def expand(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return Ordered([location.expand(at, n) for location in self.locations])

    def crop(self, start: int, end: int) -> Optional[Location]:
        cropped = self._crop_elements(start, end)
        return order(*cropped) if cropped else None


class Complemented(Location):
    """A Location read on the opposite strand"""

    def __init__(self, location: Location):
        """
        Parameters
        ----------
        location
            The Location being complemented, in forward coordinates
        """
        ObjectValidation.require_object_has_type(location, Location)
        self.location = location
        self.length = location.length

    def __str__(self):
        return f"complement({str(self.location)})"

    def __repr__(self):
        return f"<Complemented {str(self)}>"

    def __eq__(self, other):
        if type(other) is not Complemented:
            return False
        return self.location == other.location

    def __hash__(self):
        return hash((Complemented, self.location))

    @property
    def strand(self) -> Strand:
        return self.location.strand.reverse()

    @property
    def is_contiguous(self) -> bool:
        return self.location.is_contiguous

    @property
    def partial_count(self) -> int:
        return self.location.partial_count

    def sort_key(self) -> SortKey:
        return self.location.sort_key()

    def region(self) -> Region:
        return self.location.region().complement()

    def complement(self) -> Location:
        return self.location

    def reverse(self, length: int) -> "Complemented":
        return Complemented(self.location.reverse(length))

    def normalize(self, length: int) -> "Complemented":
        return Complemented(self.location.normalize(length))

    def shift(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return self.location.shift(at, n).complement()

    def expand(self, at: int, n: int) -> Location:
        if n == 0:
            return self
        return self.location.expand(at, n).complement()

    def crop(self, start: int, end: int) -> Optional["Complemented"]:
        cropped = self.location.crop(start, end)
        return Complemented(cropped) if cropped is not None else None

    def to_biopython(self) -> Union[SimpleLocation, CompoundLocation]:
        parts = _biopython_parts(self)
        if len(parts) == 1:
            return parts[0]
        operator = self.location.operator if isinstance(self.location, _ListLocation) else "join"
        return CompoundLocation(parts, operator=operator)


def _biopython_parts(location: Location) -> List[SimpleLocation]:
    """Flattens a Location into BioPython SimpleLocations in reading order. CompoundLocations cannot nest."""
    if isinstance(location, _ListLocation):
        return [part for element in location.locations for part in _biopython_parts(element)]
    if isinstance(location, Complemented):
        return [
            SimpleLocation(part.start, part.end, Strand.from_int(part.strand).reverse().value)
            for part in reversed(_biopython_parts(location.location))
        ]
    return [location.to_biopython()]


def _bounds(location: Location) -> Optional[Tuple[int, int, bool, bool]]:
    """Returns ``(start, end, partial5, partial3)`` for the Locations that may be fused into a Ranged"""
    if type(location) is Ranged:
        return location.start, location.end, location.partial5, location.partial3
    if type(location) is Point:
        return location.position, location.position + 1, False, False
    return None


def _merge(a: Location, b: Location, force: bool) -> Optional[Location]:
    """Returns the single Location equivalent to ``a`` followed by ``b``, or None if they must stay separate"""
    if a == b:
        return a
    if type(a) is Between and b.is_contiguous and type(b) is not Complemented:
        if b.region().start == a.position:
            return b
    if type(b) is Between and a.is_contiguous and type(a) is not Complemented:
        if a.region().end == b.position:
            return a
    if type(a) is Complemented and type(b) is Complemented:
        # The complement strand is read backwards, so the forward pieces meet in the opposite order.
        merged = _merge(b.location, a.location, force)
        return Complemented(merged) if merged is not None else None
    left, right = _bounds(a), _bounds(b)
    if left is None or right is None or left[1] != right[0]:
        return None
    if force or left[3] or right[2]:
        return Ranged(left[0], right[1], left[2], right[3])
    return None


def _flatten_joined(locations: Sequence[Location]) -> List[Location]:
    flat = []
    for location in locations:
        if type(location) is Joined:
            flat.extend(_flatten_joined(location.locations))
        else:
            flat.append(location)
    return flat


def join(*locations: Location, force: bool = False) -> Location:
    """Joins Locations into one, merging neighbors where that does not lose information.

    Nested joins are flattened. Adjacent elements are merged when they are identical, when a boundary sits at the
    edge of its neighbor, when both are complemented and their contents merge, or when two spans abut and one of
    the touching ends is partial.

    Parameters
    ----------
    locations
        One or more Locations in reading order
    force
        Also merge abutting spans whose touching ends are not partial

    Returns
    -------
    The single remaining Location, or a :class:`Joined` of the merged elements.
    """
    if not locations:
        raise LocationException("join() requires at least one location")
    merged: List[Location] = []
    for location in _flatten_joined(locations):
        if merged:
            combined = _merge(merged[-1], location, force)
            if combined is not None:
                merged[-1] = combined
                continue
        merged.append(location)
    if len(merged) == 1:
        return merged[0]
    return Joined(merged)


def order(*locations: Location) -> Location:
    """Groups Locations into an :class:`Ordered`. A single Location is returned as is."""
    if not locations:
        raise LocationException("order() requires at least one location")
    if len(locations) == 1:
        return locations[0]
    return Ordered(locations)
