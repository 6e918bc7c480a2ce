"""Shared test fixtures for featuremodel."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from featuremodel.models.artifact import Artifact
from featuremodel.models.artifact_id import ArtifactId
from featuremodel.models.prototype import Prototype


@pytest.fixture
def artifact_id() -> ArtifactId:
    """Provide a plain jar id."""
    return ArtifactId.from_mvn_id("org.apache.sling:org.apache.sling.api:2.16.4")


@pytest.fixture
def other_id() -> ArtifactId:
    """Provide an id different from ``artifact_id``."""
    return ArtifactId.from_mvn_id("org.apache.sling:org.apache.sling.engine:2.6.0")


@pytest.fixture
def artifact(artifact_id: ArtifactId) -> Artifact:
    """Provide an artifact without metadata."""
    return Artifact(artifact_id)


@pytest.fixture
def feature_url() -> str:
    """Provide a location of a base feature."""
    return "https://features.example.org/base/feature.json"


# ---------------------------------------------------------------------------
# Factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_artifact() -> Callable[..., Artifact]:
    """Factory fixture: build an Artifact from an mvn id and metadata."""

    def _factory(mvn_id: str = "g:a:1.0.0", **metadata: Any) -> Artifact:
        artifact = Artifact(ArtifactId.from_mvn_id(mvn_id))
        artifact.metadata.update({k.replace("_", "-"): str(v) for k, v in metadata.items()})
        return artifact

    return _factory


@pytest.fixture
def populated_prototype(artifact_id: ArtifactId) -> Prototype:
    """A prototype with every removal collection filled."""
    prototype = Prototype.with_id(artifact_id)
    prototype.configuration_removals.append("org.apache.sling.commons.log.LogManager")
    prototype.bundle_removals.append(ArtifactId.from_mvn_id("g:bundle:1.0.0"))
    prototype.framework_properties_removals.append("org.osgi.framework.bootdelegation")
    prototype.extension_removals.append("repoinit")
    prototype.artifact_extension_removals_for("content-packages").append(
        ArtifactId.from_mvn_id("g:content:zip:1.0.0")
    )
    return prototype
