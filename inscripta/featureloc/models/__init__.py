"""
Data models. These models allow for validation of inputs to a FeatureLoc feature table.
"""

from inscripta.featureloc.models.models import (  # noqa: F401
    QualifierModel,
    FeatureModel,
    FeatureTableModel,
)
