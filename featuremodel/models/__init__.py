"""Feature model records — pydantic v2 models for artifacts and prototypes."""

from featuremodel.models.artifact import (
    DEFAULT_ALIAS_VERSION,
    KEY_ALIAS,
    KEY_START_ORDER,
    Artifact,
)
from featuremodel.models.artifact_id import ArtifactId, OsgiVersion, to_osgi_version
from featuremodel.models.prototype import (
    LocationSource,
    ModuleSource,
    Prototype,
    PrototypeSource,
)

__all__ = [
    # ids
    "ArtifactId",
    "OsgiVersion",
    "to_osgi_version",
    # artifacts
    "Artifact",
    "KEY_ALIAS",
    "KEY_START_ORDER",
    "DEFAULT_ALIAS_VERSION",
    # prototypes
    "Prototype",
    "PrototypeSource",
    "ModuleSource",
    "LocationSource",
]
