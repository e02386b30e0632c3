"""
Data models. These models allow for validation of inputs to a FeatureLoc feature table.
"""
from dataclasses import field
from typing import ClassVar, List, Optional, Type
from uuid import UUID

import marshmallow
from marshmallow import Schema
from marshmallow_dataclass import dataclass

from inscripta.featureloc.exc import LocationSyntaxError, ValidationException
from inscripta.featureloc.feature.feature import Feature
from inscripta.featureloc.feature.qualifiers import Qualifiers
from inscripta.featureloc.feature.table import FeatureTable
from inscripta.featureloc.location.parser import parse_location


def _validate_location(text: str):
    try:
        parse_location(text)
    except LocationSyntaxError as e:
        raise marshmallow.ValidationError(str(e))


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class QualifierModel(BaseModel):
    """A single qualifier. Toggle qualifiers have no value."""

    name: str
    value: Optional[str] = None


@dataclass
class FeatureModel(BaseModel):
    """Data model that allows construction of a :class:`~inscripta.featureloc.feature.Feature` object."""

    key: str
    location: str = field(metadata={"validate": _validate_location})
    qualifiers: List[QualifierModel] = field(default_factory=list)
    guid: Optional[UUID] = None

    def to_feature(self) -> Feature:
        """Construct a :class:`~inscripta.featureloc.feature.Feature` from this model.

        If a guid was provided, it must match the guid of the constructed Feature.
        """
        try:
            location = parse_location(self.location)
        except LocationSyntaxError as e:
            raise ValidationException(f"Invalid location for feature {self.key}: {e}") from e
        feature = Feature(
            self.key,
            location,
            Qualifiers((qualifier.name, qualifier.value) for qualifier in self.qualifiers),
        )
        if self.guid is not None and self.guid != feature.guid:
            raise ValidationException(f"Feature guid {self.guid} does not match its contents ({feature.guid})")
        return feature

    @staticmethod
    def from_feature(feature: Feature) -> "FeatureModel":
        """Convert a :class:`~inscripta.featureloc.feature.Feature` to a :class:`FeatureModel`"""
        return FeatureModel.Schema().load(feature.to_dict())


@dataclass
class FeatureTableModel(BaseModel):
    """Data model that allows construction of a :class:`~inscripta.featureloc.feature.FeatureTable` object."""

    features: List[FeatureModel] = field(default_factory=list)

    def to_feature_table(self) -> FeatureTable:
        """Construct a :class:`~inscripta.featureloc.feature.FeatureTable`. Features keep the order they are
        listed in."""
        table = FeatureTable()
        for index, model in enumerate(self.features):
            table.insert(index, model.to_feature())
        return table

    @staticmethod
    def from_feature_table(table: FeatureTable) -> "FeatureTableModel":
        """Convert a :class:`~inscripta.featureloc.feature.FeatureTable` to a :class:`FeatureTableModel`"""
        return FeatureTableModel.Schema().load({"features": [feature.to_dict() for feature in table]})
