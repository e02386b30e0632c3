from abc import ABC, abstractmethod
from typing import Tuple

from inscripta.featureloc import AbstractLocation
from inscripta.featureloc.location.strand import Strand

# A contiguous Location sorts as (smaller coordinate, larger coordinate, number of partial flags).
SortKey = Tuple[Tuple[int, int, int], ...]


class Location(AbstractLocation, ABC):
    """Abstract symbolic location of a feature with respect to a sequence"""

    @property
    def strand(self) -> Strand:
        """Strand this Location is read on"""
        return Strand.PLUS

    @abstractmethod
    def sort_key(self) -> SortKey:
        """Returns the key used to order Locations. List Locations concatenate the keys of their elements,
        so that they compare element by element."""

    def __lt__(self, other: "Location"):
        return location_less(self, other)


def location_key(location: Location) -> SortKey:
    """Returns the ordering key of a Location"""
    return location.sort_key()


def location_less(a: Location, b: Location) -> bool:
    """Returns True iff Location ``a`` sorts strictly before Location ``b``.

    Spans compare by their smaller then larger coordinate, and ties are broken by placing the Location with fewer
    partial boundaries first. List Locations compare element by element, and complemented Locations compare by
    the Location they wrap. For example, ``1 < 1..42 < 42 < 42..723 < 723``.
    """
    return location_key(a) < location_key(b)
