"""Maven-style module coordinates used to identify artifacts and features.

Canonical textual form (``mvn id``)::

    groupId:artifactId[:type[:classifier]]:version

URL form::

    mvn:groupId/artifactId/version[/type[/classifier]]

The type is omitted from both forms when it is ``jar`` and there is no
classifier.
"""

from __future__ import annotations

from functools import total_ordering
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from featuremodel.errors import IdentifierFormatError

DEFAULT_TYPE = "jar"
MVN_URL_SCHEME = "mvn:"


class OsgiVersion(NamedTuple):
    """A version reduced to OSGi semantics: three numbers and a qualifier."""

    major: int
    minor: int
    micro: int
    qualifier: str

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.micro}"
        return f"{base}.{self.qualifier}" if self.qualifier else base


def to_osgi_version(version: str) -> OsgiVersion:
    """Map a Maven version string onto an ``OsgiVersion``.

    Missing numeric parts default to ``0``. Everything after the first ``-``,
    or from the first non-numeric dotted part onwards, becomes the qualifier.
    """
    base, _, qualifier = version.partition("-")
    segments = base.split(".")
    numbers: list[int] = []
    while segments and len(numbers) < 3 and segments[0].isdecimal():
        numbers.append(int(segments.pop(0)))
    rest = ".".join(segments)
    if rest:
        qualifier = f"{rest}-{qualifier}" if qualifier else rest
    numbers.extend([0] * (3 - len(numbers)))
    return OsgiVersion(numbers[0], numbers[1], numbers[2], qualifier)


@total_ordering
class ArtifactId(BaseModel):
    """Immutable coordinates of a module.

    Equality and hashing cover all five coordinates. The total order is
    group, artifact, OSGi version, type, then classifier (no classifier
    sorts first).
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    version: str = Field(min_length=1)
    type: str = DEFAULT_TYPE
    classifier: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, value: str | None) -> str:
        return value or DEFAULT_TYPE

    @field_validator("classifier", mode="before")
    @classmethod
    def empty_classifier(cls, value: str | None) -> str | None:
        return value or None

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_mvn_id(cls, coordinates: str) -> ArtifactId:
        """Parse ``groupId:artifactId[:type[:classifier]]:version``."""
        parts = coordinates.split(":")
        if not 3 <= len(parts) <= 5:
            raise IdentifierFormatError(f"Invalid mvn coordinates: {coordinates!r}")
        return cls._from_parts(
            coordinates,
            group_id=parts[0],
            artifact_id=parts[1],
            version=parts[-1],
            type=parts[2] if len(parts) > 3 else None,
            classifier=parts[3] if len(parts) > 4 else None,
        )

    @classmethod
    def from_mvn_url(cls, url: str) -> ArtifactId:
        """Parse ``mvn:groupId/artifactId/version[/type[/classifier]]``.

        A repository prefix ending in ``!`` is ignored.
        """
        if not url.startswith(MVN_URL_SCHEME):
            raise IdentifierFormatError(f"Invalid mvn url: {url!r}")
        content = url[len(MVN_URL_SCHEME):].rpartition("!")[2]
        parts = content.split("/")
        if not 3 <= len(parts) <= 5:
            raise IdentifierFormatError(f"Invalid mvn url: {url!r}")
        return cls._from_parts(
            url,
            group_id=parts[0],
            artifact_id=parts[1],
            version=parts[2],
            type=parts[3] if len(parts) > 3 else None,
            classifier=parts[4] if len(parts) > 4 else None,
        )

    @classmethod
    def _from_parts(
        cls,
        source: str,
        *,
        group_id: str,
        artifact_id: str,
        version: str,
        type: str | None,
        classifier: str | None,
    ) -> ArtifactId:
        stripped = [p.strip() for p in (group_id, artifact_id, version)]
        if not all(stripped):
            raise IdentifierFormatError(
                f"Group, artifact and version must not be empty: {source!r}"
            )
        return cls(
            group_id=stripped[0],
            artifact_id=stripped[1],
            version=stripped[2],
            type=type,
            classifier=classifier,
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _type_and_classifier(self) -> list[str]:
        if self.classifier is not None:
            return [self.type, self.classifier]
        if self.type != DEFAULT_TYPE:
            return [self.type]
        return []

    def to_mvn_id(self) -> str:
        """Return the canonical ``g:a[:type[:classifier]]:v`` form."""
        return ":".join(
            [self.group_id, self.artifact_id, *self._type_and_classifier(), self.version]
        )

    def to_mvn_url(self) -> str:
        """Return the ``mvn:g/a/v[/type[/classifier]]`` form."""
        parts = [self.group_id, self.artifact_id, self.version, *self._type_and_classifier()]
        return MVN_URL_SCHEME + "/".join(parts)

    def to_mvn_path(self) -> str:
        """Return the path of this artifact inside a Maven repository."""
        file_name = f"{self.artifact_id}-{self.version}"
        if self.classifier is not None:
            file_name += f"-{self.classifier}"
        file_name += f".{self.type}"
        return "/".join(
            [self.group_id.replace(".", "/"), self.artifact_id, self.version, file_name]
        )

    def __str__(self) -> str:
        return self.to_mvn_id()

    # ------------------------------------------------------------------
    # Version helpers
    # ------------------------------------------------------------------

    @property
    def osgi_version(self) -> OsgiVersion:
        return to_osgi_version(self.version)

    @property
    def is_snapshot(self) -> bool:
        return self.version.endswith("SNAPSHOT")

    def is_same(self, other: ArtifactId) -> bool:
        """Whether both ids name the same module, ignoring the version."""
        return (
            self.group_id == other.group_id
            and self.artifact_id == other.artifact_id
            and self.type == other.type
            and self.classifier == other.classifier
        )

    def change_version(self, version: str) -> ArtifactId:
        return self.model_copy(update={"version": version})

    def change_type(self, type: str | None) -> ArtifactId:
        return self.model_copy(update={"type": type or DEFAULT_TYPE})

    def change_classifier(self, classifier: str | None) -> ArtifactId:
        return self.model_copy(update={"classifier": classifier or None})

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _sort_key(self) -> tuple:
        return (
            self.group_id,
            self.artifact_id,
            self.osgi_version,
            self.type,
            self.classifier is not None,
            self.classifier or "",
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ArtifactId):
            return NotImplemented
        return self._sort_key() < other._sort_key()
