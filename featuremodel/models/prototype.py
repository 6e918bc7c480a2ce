"""Prototype model: the base feature a derived feature is built from.

A prototype names its base feature either by module id or by location,
never both. Its removal collections list what to strip from the base
feature when the prototype is merged into the derived one:

- configurations (by pid)
- bundles (by id)
- framework properties (by name)
- whole extensions (by name)
- single artifacts inside an extension (extension name -> ids)

Instances are mutable and not thread-safe.
"""

from __future__ import annotations

import logging
from functools import total_ordering
from typing import Annotated, Any, Literal, Union

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, ValidationError

from featuremodel.errors import InvalidArgumentError
from featuremodel.models.artifact_id import ArtifactId

logger = logging.getLogger(__name__)


class ModuleSource(BaseModel):
    """Base feature referenced by its module id."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["id"] = "id"
    id: ArtifactId

    def sort_key(self) -> str:
        return self.id.to_mvn_url()

    def __str__(self) -> str:
        return self.id.to_mvn_id()


class LocationSource(BaseModel):
    """Base feature referenced by its location."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["url"] = "url"
    url: AnyUrl

    def sort_key(self) -> str:
        return str(self.url)

    def __str__(self) -> str:
        return str(self.url)


PrototypeSource = Annotated[
    Union[ModuleSource, LocationSource], Field(discriminator="kind")
]


@total_ordering
class Prototype(BaseModel):
    """A blueprint of a feature plus the parts to remove from it.

    Build instances with ``Prototype.with_id`` or ``Prototype.with_url``.
    The removal collections are plain lists and dicts; parsers append to
    them directly.
    """

    source: PrototypeSource = Field(frozen=True)

    configuration_removals: list[str] = Field(default_factory=list)
    bundle_removals: list[ArtifactId] = Field(default_factory=list)
    framework_properties_removals: list[str] = Field(default_factory=list)
    extension_removals: list[str] = Field(default_factory=list)
    artifact_extension_removals: dict[str, list[ArtifactId]] = Field(
        default_factory=dict
    )

    def __init__(
        self, source: ModuleSource | LocationSource | None = None, **data: Any
    ) -> None:
        if source is None:
            raise InvalidArgumentError("source must not be None.")
        super().__init__(source=source, **data)

    @classmethod
    def with_id(cls, id: ArtifactId | None) -> Prototype:
        """Create a prototype referencing its base feature by id."""
        if id is None:
            raise InvalidArgumentError("id must not be None.")
        return cls(ModuleSource(id=id))

    @classmethod
    def with_url(cls, url: AnyUrl | str | None) -> Prototype:
        """Create a prototype referencing its base feature by location.

        The location is stored as a pydantic ``AnyUrl``, which normalises it:
        ``https://x.org`` becomes ``https://x.org/``. ``str(url)``,
        equality and ordering all use the normalised form, not the text as
        given.
        """
        if url is None:
            raise InvalidArgumentError("url must not be None.")
        try:
            location = url if isinstance(url, AnyUrl) else AnyUrl(url)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid prototype url: {url!r}") from exc
        return cls(LocationSource(url=location))

    @property
    def id(self) -> ArtifactId | None:
        return self.source.id if isinstance(self.source, ModuleSource) else None

    @property
    def url(self) -> AnyUrl | None:
        return self.source.url if isinstance(self.source, LocationSource) else None

    def artifact_extension_removals_for(self, extension: str) -> list[ArtifactId]:
        """Return the live removal list for one extension, creating it if needed."""
        return self.artifact_extension_removals.setdefault(extension, [])

    @property
    def has_removals(self) -> bool:
        return any(
            (
                self.configuration_removals,
                self.bundle_removals,
                self.framework_properties_removals,
                self.extension_removals,
                self.artifact_extension_removals,
            )
        )

    def clone(self) -> Prototype:
        """Return a prototype for the same base feature with NO removals.

        This is not a copy: the removal collections of the result are new
        and empty, so the same base can be customised again from scratch.
        """
        logger.debug("Cloning prototype %s without its removals", self.source)
        return Prototype(self.source)

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.source == other.source

    def __lt__(self, other: object) -> bool:
        # Deliberate deviation from upstream compareTo: it took the other
        # side's key from this.url whenever the other side was url-based, so
        # any two url prototypes tied. Here each side contributes its own
        # key, mvn url for ids and location for urls.
        if not isinstance(other, Prototype):
            return NotImplemented
        return self.source.sort_key() < other.source.sort_key()

    def __hash__(self) -> int:
        return hash(self.source)

    def __str__(self) -> str:
        return f"Prototype [id={self.source}]"
