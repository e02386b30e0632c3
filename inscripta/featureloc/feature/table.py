from bisect import bisect_right
from typing import Callable, Iterable, Iterator, List

from inscripta.featureloc.feature.feature import Feature
from inscripta.featureloc.location.location import Location
from inscripta.featureloc.region.region import Region, flatten
from inscripta.featureloc.util.object_validation import ObjectValidation


def _table_order(feature: Feature):
    # Sources all compare equal so that they keep the order they were added in.
    if feature.is_source:
        return False, ()
    return True, feature.sort_key()


class FeatureTable:
    """Ordered collection of Features.

    Features keyed ``source`` come first, in the order they were added; every other feature follows in Location
    order. :meth:`add` maintains this order, while :meth:`insert` places a feature at an explicit index for callers
    that need an unconventional order. A FeatureTable has a single owner and is modified in place.
    """

    def __init__(self, features: Iterable[Feature] = ()):
        """
        Parameters
        ----------
        features
            Features to :meth:`add`, in order
        """
        self._features: List[Feature] = []
        for feature in features:
            self.add(feature)

    def __repr__(self):
        return "<FeatureTable {}>".format(", ".join(str(feature) for feature in self._features))

    def __eq__(self, other):
        if type(other) is not FeatureTable:
            return False
        return self._features == other._features

    def __len__(self):
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features)

    def __getitem__(self, index):
        return self._features[index]

    @property
    def features(self) -> List[Feature]:
        return list(self._features)

    def _num_sources(self) -> int:
        count = 0
        for feature in self._features:
            if not feature.is_source:
                break
            count += 1
        return count

    def add(self, feature: Feature):
        """Adds a Feature at the position that keeps this table ordered"""
        ObjectValidation.require_object_has_type(feature, Feature)
        lower = self._num_sources()
        if feature.is_source:
            self._features.insert(lower, feature)
            return
        keys = [other.sort_key() for other in self._features[lower:]]
        self._features.insert(lower + bisect_right(keys, feature.sort_key()), feature)

    def insert(self, index: int, feature: Feature):
        """Inserts a Feature at the given index without reordering"""
        ObjectValidation.require_object_has_type(feature, Feature)
        self._features.insert(index, feature)

    def remove(self, feature: Feature):
        self._features.remove(feature)

    def sort(self):
        """Restores the table order. Features that compare equal keep their relative order."""
        self._features.sort(key=_table_order)

    def filter(self, predicate: Callable[[Feature], bool]) -> List[Feature]:
        """Returns the Features matching the predicate, in table order"""
        return [feature for feature in self._features if predicate(feature)]

    def map_locations(self, transform: Callable[[Location], Location]):
        """Replaces the Location of every Feature with the transformed Location, then restores the table order"""
        self._features = [feature.with_location(transform(feature.location)) for feature in self._features]
        self.sort()

    def shift(self, at: int, n: int):
        """Updates every Location for an edit of ``n`` bases at ``at``. See :meth:`Location.shift`."""
        self.map_locations(lambda location: location.shift(at, n))

    def expand(self, at: int, n: int):
        """Same as :meth:`shift`, using :meth:`Location.expand`"""
        self.map_locations(lambda location: location.expand(at, n))

    def reverse(self, length: int):
        self.map_locations(lambda location: location.reverse(length))

    def normalize(self, length: int):
        self.map_locations(lambda location: location.normalize(length))


def crop(region: Region, features: Iterable[Feature]) -> List[Feature]:
    """Carries Features into the sequence that a Region extracts.

    Every Segment of the Region keeps the part of each Feature lying within it, re-anchored to where the Segment
    lands in the extracted sequence. Ends cut off by a Segment boundary become partial, and the Features within a
    reversed Segment are reverse complemented along with its bases.

    Parameters
    ----------
    region
        Region within the sequence annotated by the Features. Coordinates must lie within that sequence; see
        :func:`~inscripta.featureloc.region.clip` and :func:`~inscripta.featureloc.region.wrap`.
    features
        Features to crop

    Returns
    -------
    The cropped Features of each Segment in Location order, one Segment after another.
    """
    features = list(features)
    cropped: List[Feature] = []
    offset = 0
    for segment in flatten(region):
        located = []
        for feature in features:
            location = feature.location.crop(segment.start, segment.end)
            if location is None:
                continue
            if segment.is_reversed:
                location = location.reverse(segment.length).complement()
            located.append(feature.with_location(location.shift(0, offset)))
        located.sort(key=Feature.sort_key)
        cropped.extend(located)
        offset += segment.length
    return cropped
