"""
Regions are the concrete, resolved counterpart of Locations: plain numeric spans that can be resized and used
to slice a sequence.
"""
from abc import ABC
from functools import reduce
from typing import List, Iterable, Iterator, Tuple

from inscripta.featureloc import AbstractRegion, AbstractSequence
from inscripta.featureloc.exc import UnsupportedOperationException
from inscripta.featureloc.region.modifier import Modifier, Head, Tail, HeadTail, HeadHead, TailTail
from inscripta.featureloc.util.object_validation import ObjectValidation


class Region(AbstractRegion, ABC):
    """Abstract concrete span (or list of spans) on a sequence"""

    def __repr__(self):
        return "<{} {}>".format(type(self).__name__, str(self))


class Segment(Region):
    """A contiguous span read from ``head`` to ``tail``. A ``head`` greater than ``tail`` denotes a span read on
    the complement strand."""

    def __init__(self, head: int, tail: int):
        """
        Parameters
        ----------
        head
            0-based coordinate where reading starts
        tail
            0-based coordinate where reading stops
        """
        self.head = head
        self.tail = tail
        self.length = abs(tail - head)

    @property
    def is_reversed(self) -> bool:
        return self.tail < self.head

    @property
    def start(self) -> int:
        """Smaller of the two coordinates"""
        return min(self.head, self.tail)

    @property
    def end(self) -> int:
        """Larger of the two coordinates"""
        return max(self.head, self.tail)

    def __str__(self):
        return "{}..{}".format(self.head, self.tail)

    def __eq__(self, other):
        if type(other) is not Segment:
            return False
        return self.head == other.head and self.tail == other.tail

    def __hash__(self):
        return hash((Segment, self.head, self.tail))

    def forward(self) -> "Segment":
        """Returns this Segment oriented so that ``head <= tail``"""
        return Segment(self.start, self.end)

    def resize(self, modifier: Modifier) -> "Segment":
        return Segment(*modifier.apply(self.head, self.tail))

    def complement(self) -> "Segment":
        return Segment(self.tail, self.head)

    def locate(self, sequence: AbstractSequence) -> AbstractSequence:
        """Returns the bases covered by this Segment. A resize may leave a Segment hanging off either end of the
        sequence. On a circular sequence the overhang wraps around the origin, and on a linear sequence it is clipped.
        """
        length = len(sequence)
        if self.start < 0 or self.end > length:
            if sequence.is_circular and length > 0:
                return wrap(self, length).locate(sequence)
            return clip(self, length).locate(sequence)
        if self.is_reversed:
            return sequence[self.tail : self.head].reverse_complement()
        return sequence[self.head : self.tail]


class Regions(Region):
    """An ordered list of Regions read one after the other as if they formed a single span"""

    def __init__(self, regions: Iterable[Region] = ()):
        self.regions: Tuple[Region, ...] = tuple(regions)
        ObjectValidation.require_all_have_type(self.regions, Region)
        self.length = sum(region.length for region in self.regions)

    @property
    def head(self) -> int:
        return self.regions[0].head if self.regions else 0

    @property
    def tail(self) -> int:
        return self.regions[-1].tail if self.regions else 0

    def __str__(self):
        return "[{}]".format(", ".join(str(region) for region in self.regions))

    def __eq__(self, other):
        if type(other) is not Regions:
            return False
        return self.regions == other.regions

    def __hash__(self):
        return hash((Regions, self.regions))

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __getitem__(self, index):
        return self.regions[index]

    @property
    def num_regions(self) -> int:
        return len(self.regions)

    def _bounds(self, modifier: Modifier) -> Tuple[int, int]:
        """Converts a modifier into a pair of offsets measured from the logical head of this list"""
        if type(modifier) is Head:
            return modifier.offset, modifier.offset
        if type(modifier) is Tail:
            return modifier.offset + self.length, modifier.offset + self.length
        if type(modifier) is HeadHead:
            return modifier.head, modifier.tail
        if type(modifier) is HeadTail:
            return modifier.head, modifier.tail + self.length
        if type(modifier) is TailTail:
            return modifier.head + self.length, modifier.tail + self.length
        raise UnsupportedOperationException("Unsupported modifier {}".format(repr(modifier)))

    def resize(self, modifier: Modifier) -> Region:
        """Resizes this list as though it were one span. Offsets are located within the member Regions; members
        left of the new head or right of the new tail are dropped, and the result never has more members than
        this list.
        """
        if not self.regions:
            return self
        regions = list(self.regions)
        lower, upper = self._bounds(modifier)

        # Offsets that land exactly on a boundary stay in the earlier member.
        left, right = 0, 0
        for k in range(len(regions) - 1):
            n = regions[k].length
            if n < lower:
                left = k + 1
                lower -= n
            if n < upper:
                right = k + 1
                upper -= n

        if left > right:
            return regions[left].resize(Head(lower))
        if left == right:
            if isinstance(modifier, (Head, Tail)):
                return regions[left].resize(Head(lower))
            return regions[left].resize(HeadHead(lower, upper))
        regions[left] = regions[left].resize(HeadTail(lower, 0))
        regions[right] = regions[right].resize(HeadHead(0, upper))
        return Regions(regions[left : right + 1])

    def complement(self) -> "Regions":
        return Regions(region.complement() for region in reversed(self.regions))

    def locate(self, sequence: AbstractSequence) -> AbstractSequence:
        return reduce(
            lambda acc, region: acc.append(region.locate(sequence)),
            self.regions,
            sequence[0:0],
        )


def flatten(region: Region) -> Iterator[Segment]:
    """Yields the Segments of a possibly nested Region in reading order"""
    if isinstance(region, Regions):
        for member in region:
            yield from flatten(member)
    else:
        yield region


def clip(region: Region, length: int) -> Region:
    """Moves every coordinate of a Region into ``[0, length]``, keeping the direction of each Segment"""
    if isinstance(region, Regions):
        return Regions(clip(member, length) for member in region)
    return Segment(min(max(region.head, 0), length), min(max(region.tail, 0), length))


def wrap(region: Region, length: int) -> Region:
    """Splits every Segment that runs past either end of a circular sequence into pieces within ``[0, length]``.

    Parameters
    ----------
    region
        Any Region, including nested Regions
    length
        Length of the circular sequence. Must be positive.

    Returns
    -------
    A Region reading the same bases as the input. Segments that already fit are returned as they are.
    """
    if isinstance(region, Regions):
        return Regions(wrap(member, length) for member in region)
    if region.is_reversed:
        return wrap(region.forward(), length).complement()
    if region.head >= 0 and region.tail <= length:
        return region
    pieces = []
    position = region.head
    while position < region.tail:
        offset = position % length
        stop = min(length, offset + region.tail - position)
        pieces.append(Segment(offset, stop))
        position += stop - offset
    return Regions(pieces)


def segment_key(segment: Segment) -> Tuple[int, int]:
    """Sort key ordering Segments by their smaller, then larger coordinate regardless of direction"""
    return segment.start, segment.end


def minimize(region: Region) -> List[Segment]:
    """Flattens a Region to a sorted list of forward Segments with overlapping and abutting spans merged.

    Parameters
    ----------
    region
        Any Region, including nested Regions

    Returns
    -------
    Sorted, non-overlapping list of forward Segments covering the same positions as the input.
    """
    segments = sorted((segment.forward() for segment in flatten(region)), key=segment_key)
    merged: List[Segment] = []
    for segment in segments:
        if merged and segment.head <= merged[-1].tail:
            if segment.tail > merged[-1].tail:
                merged[-1] = Segment(merged[-1].head, segment.tail)
        else:
            merged.append(segment)
    return merged


def invert_linear(region: Region, length: int) -> List[Segment]:
    """Returns the forward Segments of ``[0, length)`` not covered by the given Region"""
    gaps = []
    position = 0
    for segment in minimize(region):
        if segment.head > position:
            gaps.append(Segment(position, min(segment.head, length)))
        position = max(position, segment.tail)
        if position >= length:
            break
    if position < length:
        gaps.append(Segment(position, length))
    return gaps


def invert_circular(region: Region, length: int) -> List[Region]:
    """Same as :func:`invert_linear`, except that the gaps touching both ends of the sequence are fused into a
    single Region wrapping around the origin. The fused Region is listed last."""
    gaps: List[Region] = list(invert_linear(region, length))
    if len(gaps) > 1 and gaps[0].head == 0 and gaps[-1].tail == length:
        first, last = gaps[0], gaps[-1]
        gaps = gaps[1:-1] + [Regions([last, first])]
    return gaps
