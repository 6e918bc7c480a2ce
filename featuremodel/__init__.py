"""featuremodel: artifacts and prototypes of a feature packaging model.

- ``ArtifactId``: Maven-style module coordinates with a total order
- ``Artifact``: module id plus metadata (aliases, start order)
- ``Prototype``: base feature reference plus removal lists
"""

__version__ = "0.1.0"
__description__ = "Artifact and prototype records of a feature packaging model"

from featuremodel.errors import (
    FeatureFormatError,
    FeatureModelError,
    IdentifierFormatError,
    InvalidArgumentError,
    InvalidStateError,
)
from featuremodel.models import Artifact, ArtifactId, Prototype

__all__ = [
    "Artifact",
    "ArtifactId",
    "Prototype",
    "FeatureModelError",
    "InvalidArgumentError",
    "FeatureFormatError",
    "IdentifierFormatError",
    "InvalidStateError",
    "__version__",
]
