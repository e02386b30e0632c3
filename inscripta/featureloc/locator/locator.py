"""
Locators resolve a textual description of a region into concrete Regions, given the features of a record and its
sequence. A locator is one of:

- a modifier applied to the whole sequence, such as ``^-20..$``
- a location, such as ``complement(3..6)``
- a selector, such as ``exon/gene=INS``

A modifier following ``@`` resizes every Region found by the locator on its left, and a locator consisting of only
``@`` and a modifier resizes every feature.
"""
import logging
from typing import Callable, Iterable, List, Sized

from inscripta.featureloc.constants import LOCATOR_RESIZE_DELIMITER
from inscripta.featureloc.exc import (
    LocationSyntaxError,
    LocatorSyntaxError,
    ModifierSyntaxError,
    SelectorSyntaxError,
)
from inscripta.featureloc.feature.feature import Feature
from inscripta.featureloc.feature.filter import Filter, parse_selector
from inscripta.featureloc.location.location import Location
from inscripta.featureloc.location.parser import parse_location
from inscripta.featureloc.region.modifier import Modifier, parse_modifier
from inscripta.featureloc.region.region import Region, Segment

logger = logging.getLogger(__name__)

Locator = Callable[[Iterable[Feature], Sized], List[Region]]


def relative_locator(modifier: Modifier) -> Locator:
    """Resizes the span of the whole sequence"""

    def locate(features: Iterable[Feature], sequence: Sized) -> List[Region]:
        return [Segment(0, len(sequence)).resize(modifier)]

    return locate


def location_locator(location: Location) -> Locator:
    """Returns the Region of a fixed Location"""

    def locate(features: Iterable[Feature], sequence: Sized) -> List[Region]:
        return [location.region()]

    return locate


def filter_locator(feature_filter: Filter) -> Locator:
    """Returns the Regions of the features matching a Filter, in feature order"""

    def locate(features: Iterable[Feature], sequence: Sized) -> List[Region]:
        return [feature.region() for feature in features if feature_filter(feature)]

    return locate


def all_locator(features: Iterable[Feature], sequence: Sized) -> List[Region]:
    """Returns the Regions of every feature"""
    return [feature.region() for feature in features]


def resize_locator(locator: Locator, modifier: Modifier) -> Locator:
    """Resizes every Region found by another Locator"""

    def locate(features: Iterable[Feature], sequence: Sized) -> List[Region]:
        return [region.resize(modifier) for region in locator(features, sequence)]

    return locate


def _as_plain_locator(text: str) -> Locator:
    """Tries the modifier, location and selector syntaxes in order. The first one that accepts the text wins."""
    try:
        return relative_locator(parse_modifier(text))
    except ModifierSyntaxError as e:
        logger.debug(f"{text!r} is not a modifier: {e}")
    try:
        return location_locator(parse_location(text))
    except LocationSyntaxError as e:
        logger.debug(f"{text!r} is not a location: {e}")
    try:
        return filter_locator(parse_selector(text))
    except SelectorSyntaxError as e:
        raise LocatorSyntaxError(text, e.position, "not a modifier, location or selector") from e


def _parse_resize_modifier(text: str, offset: int) -> Modifier:
    try:
        return parse_modifier(text[offset:])
    except ModifierSyntaxError as e:
        raise LocatorSyntaxError(text, offset + e.position, "invalid modifier after '@'") from e


def as_locator(text: str) -> Locator:
    """Compiles a Locator from its text form.

    Parameters
    ----------
    text
        A modifier, location or selector, optionally followed by ``@`` and a modifier

    Returns
    -------
    A function of ``(features, sequence)`` returning a list of Regions. Only ``len(sequence)`` is used.

    Raises
    ------
    LocatorSyntaxError
        If the text matches none of the syntaxes, or contains more than one ``@``.
    """
    index = text.find(LOCATOR_RESIZE_DELIMITER)
    if index < 0:
        return _as_plain_locator(text)
    second = text.find(LOCATOR_RESIZE_DELIMITER, index + 1)
    if second >= 0:
        raise LocatorSyntaxError(text, second, "only one '@' is allowed")
    modifier = _parse_resize_modifier(text, index + 1)
    if index == 0:
        return resize_locator(all_locator, modifier)
    return resize_locator(_as_plain_locator(text[:index]), modifier)
