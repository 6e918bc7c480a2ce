"""Exception hierarchy for the feature model.

Every error raised by the model is a ``FeatureModelError``. The concrete
classes also derive from the matching builtin (``ValueError`` or
``RuntimeError``) so callers that only know the builtins still catch them.
"""

from __future__ import annotations


class FeatureModelError(Exception):
    """Base class for all feature model errors."""


class InvalidArgumentError(FeatureModelError, ValueError):
    """Raised when a required constructor or setter argument is missing or invalid."""


class FeatureFormatError(FeatureModelError, ValueError):
    """Raised when a stored textual value cannot be parsed."""


class IdentifierFormatError(FeatureFormatError):
    """Raised when a module identifier is not well formed."""


class InvalidStateError(FeatureModelError, RuntimeError):
    """Raised when an object holds a value it should never hold."""
