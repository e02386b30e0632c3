"""
A :class:`Feature` annotates a :class:`~inscripta.featureloc.location.Location` with a key and
:class:`Qualifiers`. A :class:`FeatureTable` keeps Features in a deterministic order, and a :class:`Filter` built
with :func:`parse_selector` picks Features out of it.
"""

from inscripta.featureloc.feature.qualifiers import (  # noqa: F401
    Qualifiers,
    QualifierClassification,
    DEFAULT_CLASSIFICATION,
    format_qualifier,
    parse_qualifier,
)
from inscripta.featureloc.feature.feature import Feature  # noqa: F401
from inscripta.featureloc.feature.table import FeatureTable, crop  # noqa: F401
from inscripta.featureloc.feature.filter import (  # noqa: F401
    Filter,
    any_feature,
    key,
    qualifier,
    and_,
    or_,
    not_,
    parse_selector,
)
