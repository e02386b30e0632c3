"""
A :class:`Record` pairs a :class:`Sequence` with the :class:`FeatureTable` annotating it, and applies sequence edits
to both so that every feature Location stays anchored to the same bases.
"""
import logging
from typing import Iterable, List, Union

from inscripta.featureloc.constants import DEFAULT_EXTRACT_LOCATOR
from inscripta.featureloc.exc import TopologyException
from inscripta.featureloc.feature.feature import Feature
from inscripta.featureloc.feature.table import FeatureTable, crop
from inscripta.featureloc.locator.locator import as_locator
from inscripta.featureloc.region.region import Region, Regions, clip, invert_linear, wrap
from inscripta.featureloc.sequence.sequence import Sequence

logger = logging.getLogger(__name__)


class Record:
    """A sequence and its features. A Record owns its FeatureTable; edits replace the sequence and update the
    table in place."""

    def __init__(self, sequence: Sequence, features: Union[FeatureTable, Iterable[Feature], None] = None):
        """
        Parameters
        ----------
        sequence
            The annotated sequence
        features
            A FeatureTable, or Features to add to a new one
        """
        self.sequence = sequence
        if isinstance(features, FeatureTable):
            self.features = features
        else:
            self.features = FeatureTable(features or ())

    def __repr__(self):
        return "<Record {} ({} features)>".format(self.sequence.id or "", len(self.features))

    def __len__(self):
        return len(self.sequence)

    def insert(self, at: int, data: Union[str, Sequence], embed: bool = False):
        """Inserts bases before position ``at``.

        Parameters
        ----------
        at
            0-based insertion point
        data
            Bases to insert
        embed
            Use :meth:`Location.expand` instead of :meth:`Location.shift`, so that a base sitting at the insertion
            point is not moved
        """
        self.sequence = self.sequence.insert(at, data)
        n = len(str(data))
        logger.debug(f"Inserted {n} bases at {at} (embed={embed})")
        if embed:
            self.features.expand(at, n)
        else:
            self.features.shift(at, n)

    def delete(self, at: int, count: int):
        """Deletes ``count`` bases starting at position ``at``"""
        self.sequence = self.sequence.delete(at, count)
        logger.debug(f"Deleted {count} bases at {at}")
        self.features.shift(at, -count)

    def replace(self, at: int, data: Union[str, Sequence]):
        """Overwrites bases starting at position ``at``. The sequence length and all Locations are unchanged."""
        self.sequence = self.sequence.replace(at, data)
        logger.debug(f"Replaced {len(str(data))} bases at {at}")
        self.features.shift(at, 0)

    def reverse_complement(self):
        """Reverse complements the sequence. Every feature moves to the opposite strand."""
        length = len(self.sequence)
        self.sequence = self.sequence.reverse_complement()
        logger.debug(f"Reverse complemented a sequence of length {length}")
        self.features.map_locations(lambda location: location.reverse(length).complement())

    def rotate(self, n: int):
        """Makes the base at position ``n`` of a circular sequence the first base"""
        if not self.sequence.is_circular:
            raise TopologyException("Only circular records can be rotated")
        length = len(self.sequence)
        if length == 0 or n % length == 0:
            return
        n %= length
        self.sequence = self.sequence.rotate(n)
        logger.debug(f"Rotated a sequence of length {length} by {n}")
        self.features.map_locations(lambda location: location.shift(0, length - n).normalize(length))

    def locate(self, locator: str) -> List[Region]:
        """Resolves a locator string against this Record. See :func:`~inscripta.featureloc.locator.as_locator`."""
        return as_locator(locator)(self.features, self.sequence)

    def _fit(self, region: Region) -> Region:
        length = len(self.sequence)
        if self.sequence.is_circular and length > 0:
            return wrap(region, length)
        return clip(region, length)

    def extract_regions(self, *locators: str, invert: bool = False) -> List[Region]:
        """Resolves locator strings against this Record, fitting every Region within the sequence.

        Parameters
        ----------
        locators
            Locator strings. Without any, the region of every feature is returned.
        invert
            Return the parts of the sequence not covered by any Region instead

        Returns
        -------
        Distinct Regions in the order they were found. Overhangs wrap around the origin of a circular sequence
        and are clipped from a linear one. Inverted Regions are always linear.
        """
        regions: List[Region] = []
        for locator in locators or (DEFAULT_EXTRACT_LOCATOR,):
            for region in self.locate(locator):
                if region not in regions:
                    regions.append(region)
        if invert:
            regions = invert_linear(Regions(regions), len(self.sequence))
        return [self._fit(region) for region in regions]

    def extract(self, *locators: str, invert: bool = False) -> List[Sequence]:
        """Returns the subsequence of every Region found by :meth:`extract_regions`"""
        return [region.locate(self.sequence) for region in self.extract_regions(*locators, invert=invert)]

    def extract_records(self, *locators: str, invert: bool = False) -> List["Record"]:
        """Same as :meth:`extract`, except that every subsequence keeps the features it covers. See
        :func:`~inscripta.featureloc.feature.crop`."""
        records = []
        for region in self.extract_regions(*locators, invert=invert):
            records.append(Record(region.locate(self.sequence), crop(region, self.features)))
        logger.debug(f"Extracted {len(records)} records")
        return records
