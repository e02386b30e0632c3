from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from methodtools import lru_cache

from inscripta.featureloc.constants import SOURCE_KEY
from inscripta.featureloc.feature.qualifiers import (
    DEFAULT_CLASSIFICATION,
    QualifierClassification,
    Qualifiers,
    format_qualifier,
)
from inscripta.featureloc.location.location import Location, SortKey, location_key
from inscripta.featureloc.region.region import Region
from inscripta.featureloc.util.hashing import digest_object
from inscripta.featureloc.util.object_validation import ObjectValidation

QualifiersInputType = Union[Qualifiers, Dict[str, Union[Optional[str], List[Optional[str]]]], None]


class Feature:
    """A feature key, the Location it annotates, and its qualifiers"""

    def __init__(self, key: str, location: Location, qualifiers: QualifiersInputType = None):
        """
        Parameters
        ----------
        key
            Feature key, such as ``gene`` or ``CDS``
        location
            Location of this feature
        qualifiers
            Qualifiers, or a dictionary of names to a value or a list of values
        """
        ObjectValidation.require_object_has_type(location, Location)
        self.key = key
        self.location = location
        if qualifiers is None:
            self.qualifiers = Qualifiers()
        elif isinstance(qualifiers, Qualifiers):
            self.qualifiers = qualifiers
        else:
            self.qualifiers = Qualifiers.from_dict(qualifiers)

    def __str__(self):
        return f"{self.key} {self.location}"

    def __repr__(self):
        return f"<Feature {self.key} {self.location} {repr(self.qualifiers)}>"

    def __eq__(self, other):
        if type(other) is not Feature:
            return False
        if self.key != other.key:
            return False
        if self.location != other.location:
            return False
        return self.qualifiers == other.qualifiers

    def __hash__(self):
        return hash((self.key, self.location, self.qualifiers))

    @property
    def is_source(self) -> bool:
        return self.key == SOURCE_KEY

    @lru_cache(maxsize=1)
    @property
    def guid(self) -> UUID:
        """Stable identifier derived from the key, location text and qualifiers"""
        return digest_object(self.key, str(self.location), [list(pair) for pair in self.qualifiers])

    def sort_key(self) -> SortKey:
        return location_key(self.location)

    def region(self) -> Region:
        return self.location.region()

    def with_location(self, location: Location) -> "Feature":
        """Returns a copy of this Feature at a different Location"""
        if location is self.location:
            return self
        return Feature(self.key, location, self.qualifiers)

    def with_qualifiers(self, qualifiers: QualifiersInputType) -> "Feature":
        return Feature(self.key, self.location, qualifiers)

    def to_dict(self) -> Dict[str, Any]:
        """Returns a dictionary representation of this Feature, suitable for a FeatureModel"""
        return {
            "key": self.key,
            "location": str(self.location),
            "qualifiers": [{"name": name, "value": value} for name, value in self.qualifiers],
            "guid": self.guid,
        }

    def format_qualifiers(self, classification: QualifierClassification = DEFAULT_CLASSIFICATION) -> List[str]:
        """Returns the written form of each qualifier, in order"""
        return [format_qualifier(name, value, classification) for name, value in self.qualifiers]
