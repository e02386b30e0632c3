"""
:class:`Region` objects are resolved numeric spans produced from a :class:`Location` once it is anchored to a
sequence. A :class:`Segment` is a single span; :class:`Regions` is an ordered list of spans read as one.
:class:`Modifier` objects resize Regions relative to their head and tail.
"""

from inscripta.featureloc.region.modifier import (  # noqa: F401
    Modifier,
    Head,
    Tail,
    HeadTail,
    HeadHead,
    TailTail,
    parse_modifier,
)
from inscripta.featureloc.region.region import (  # noqa: F401
    Region,
    Segment,
    Regions,
    flatten,
    clip,
    wrap,
    minimize,
    segment_key,
    invert_linear,
    invert_circular,
)
