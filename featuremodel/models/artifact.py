"""Artifact model: a module id plus free-form string metadata.

Two metadata keys carry meaning of their own:

- ``alias``: comma-separated module ids the artifact is also known as.
  Entries without a version get version ``0.0.0``.
- ``start-order``: non-negative integer; absence means ``0``.

Instances are mutable and not thread-safe.
"""

from __future__ import annotations

import logging
import re
from functools import total_ordering
from typing import Any

from pydantic import BaseModel, Field

from featuremodel.errors import (
    FeatureFormatError,
    InvalidArgumentError,
    InvalidStateError,
)
from featuremodel.models.artifact_id import ArtifactId

logger = logging.getLogger(__name__)

KEY_ALIAS = "alias"
KEY_START_ORDER = "start-order"
DEFAULT_ALIAS_VERSION = "0.0.0"

_INTEGER = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _split_aliases(value: str) -> list[str]:
    """Split on commas, dropping trailing empty entries.

    A value without any comma is a single entry, even when empty.
    """
    entries = value.split(",")
    if len(entries) > 1:
        while entries and entries[-1] == "":
            entries.pop()
    return entries


@total_ordering
class Artifact(BaseModel):
    """An artifact of a feature.

    Identity is the ``id`` alone: equality, hashing and ordering ignore the
    metadata. ``metadata`` is returned as the live dict, so callers edit it
    in place.
    """

    id: ArtifactId = Field(frozen=True)
    metadata: dict[str, str] = Field(default_factory=dict)

    def __init__(self, id: ArtifactId | None = None, **data: Any) -> None:
        if id is None:
            raise InvalidArgumentError("id must not be None.")
        super().__init__(id=id, **data)

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    def get_aliases(self, include_main: bool = False) -> set[ArtifactId]:
        """Return the ids listed in the ``alias`` metadata entry.

        Parameters
        ----------
        include_main:
            Also add this artifact's own id to the result.

        Raises
        ------
        IdentifierFormatError
            If an alias entry is not a valid module id.
        """
        aliases: set[ArtifactId] = set()
        if include_main:
            aliases.add(self.id)

        value = self.metadata.get(KEY_ALIAS)
        if value is not None:
            for alias in _split_aliases(value):
                alias = alias.strip()
                if alias.count(":") <= 1:
                    logger.debug(
                        "Alias %r of %s has no version, using %s",
                        alias, self.id, DEFAULT_ALIAS_VERSION,
                    )
                    alias = f"{alias}:{DEFAULT_ALIAS_VERSION}"
                aliases.add(ArtifactId.from_mvn_id(alias))
        return aliases

    # ------------------------------------------------------------------
    # Start order
    # ------------------------------------------------------------------

    def get_start_order(self) -> int:
        """Return the start order, ``0`` if none is set.

        Raises ``FeatureFormatError`` if the stored value is not a signed
        32-bit integer and ``InvalidStateError`` if it is negative.
        """
        order = self.metadata.get(KEY_START_ORDER)
        if order is None:
            return 0
        if not _INTEGER.fullmatch(order):
            raise FeatureFormatError(f"Start order is not a number: {order!r}")
        start_order = int(order)
        if not INT_MIN <= start_order <= INT_MAX:
            raise FeatureFormatError(f"Start order is out of range: {order!r}")
        if start_order < 0:
            raise InvalidStateError(f"Start order must be >= 0 but is {order}")
        return start_order

    def set_start_order(self, start_order: int) -> None:
        """Set the start order; ``0`` removes the metadata entry."""
        if isinstance(start_order, bool) or not isinstance(start_order, int):
            raise InvalidArgumentError(
                f"Start order must be an int but is {start_order!r}"
            )
        if start_order < 0:
            raise InvalidArgumentError(f"Start order must be >= 0 but is {start_order}")
        if start_order > INT_MAX:
            raise InvalidArgumentError(f"Start order must be <= {INT_MAX} but is {start_order}")
        if start_order == 0:
            self.metadata.pop(KEY_START_ORDER, None)
        else:
            self.metadata[KEY_START_ORDER] = str(start_order)

    @property
    def start_order(self) -> int:
        return self.get_start_order()

    @start_order.setter
    def start_order(self, value: int) -> None:
        self.set_start_order(value)

    # ------------------------------------------------------------------
    # Copy and document form
    # ------------------------------------------------------------------

    def copy(self, id: ArtifactId | None) -> Artifact:  # type: ignore[override]
        """Return an artifact with a different id and the same metadata.

        The new artifact owns its own dict; the values are shared strings.
        """
        return Artifact(id, metadata=dict(self.metadata))

    def to_dict(self) -> dict[str, str]:
        """Return the document form: ``{"id": <mvn id>, **metadata}``."""
        return {"id": self.id.to_mvn_id(), **self.metadata}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | str) -> Artifact:
        """Build an artifact from its document form.

        A bare string is an artifact without metadata.
        """
        if isinstance(data, str):
            return cls(ArtifactId.from_mvn_id(data))
        entries = dict(data)
        mvn_id = entries.pop("id", None)
        if not mvn_id:
            raise InvalidArgumentError(f"Artifact entry has no id: {data!r}")
        return cls(
            ArtifactId.from_mvn_id(mvn_id),
            metadata={key: str(value) for key, value in entries.items()},
        )

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Artifact):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Artifact [id={self.id.to_mvn_id()}]"
