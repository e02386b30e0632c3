"""
:class:`Location` objects describe where a feature lies on a sequence, symbolically: a base, a boundary between
bases, a span with possibly partial ends, an ambiguous base, and joins, orders or complements of these. The
:class:`Location` API transforms locations as the sequence beneath them is edited, reversed or rotated, and lowers
them to concrete :class:`~inscripta.featureloc.region.Region` objects.
"""

from inscripta.featureloc.location.location import Location, location_key, location_less  # noqa: F401
from inscripta.featureloc.location.strand import Strand  # noqa: F401
from inscripta.featureloc.location.location_impl import (  # noqa: F401
    Between,
    Point,
    Ranged,
    Ambiguous,
    Joined,
    Ordered,
    Complemented,
    join,
    order,
)
from inscripta.featureloc.location.parser import parse_location, format_location  # noqa: F401
