"""Exception hierarchy for swagmodel.

All exceptions inherit from :class:`SwagmodelError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`swagmodel.exit_codes`.
The top-level error handler in :func:`swagmodel.app.main` catches
``SwagmodelError`` and exits with the appropriate code.

Every failure raised while turning a decoded document into an
:class:`~swagmodel.models.ApiModel` derives from :class:`ModelError`, which
records *where* in the document the problem was found (a JSON pointer such as
``#/paths/~1pets/get/security/0``) and, when known, the definition name or
path being built.

Subclass hierarchy::

    SwagmodelError (exit 1)
    +-- InvalidUsageError          (exit 2)
    +-- ConfigError                (exit 1)
    +-- SpecLoadError              (exit 7)
    +-- ModelError                 (exit 8)
        +-- UnsupportedVersion
        +-- MalformedVersion
        +-- TypeMismatch
        +-- InvalidFormat
        +-- UnsupportedRootType
        +-- MalformedSecurityEntry
        +-- UnsupportedConstruct
"""

from __future__ import annotations

from typing import Optional

from swagmodel.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_MODEL_ERROR,
    EXIT_SPEC_LOAD_ERROR,
)


class SwagmodelError(Exception):
    """Root of the hierarchy; ``exit_code`` is what the process exits with.

    Args:
        message: Shown on stderr as ``Error: <message>``.
        exit_code: Replaces the class default for this instance only.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SwagmodelError):
    """Conflicting or malformed command-line flags."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(SwagmodelError):
    """A config file that cannot be read, or an unknown output format."""


class SpecLoadError(SwagmodelError):
    """Raised when a document cannot be fetched, read, or decoded."""

    exit_code = EXIT_SPEC_LOAD_ERROR


class ModelError(SwagmodelError):
    """Base class for every failure raised while modeling a decoded document.

    Args:
        message: Description of the problem.
        location: JSON pointer of the offending node (``"#"`` is the root).
        context: Optional name of the definition or path being built.
    """

    exit_code = EXIT_MODEL_ERROR

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.location = location
        self.context = context
        full_message = message
        if context:
            full_message = f"{full_message} (in {context})"
        if location:
            full_message = f"{full_message} at {location}"
        super().__init__(full_message)
        self.message = message


class UnsupportedVersion(ModelError):
    """The declared document version is missing or outside [2.0, 3.0.1]."""


class MalformedVersion(ModelError):
    """A version string has a component that is not a non-negative integer."""


class TypeMismatch(ModelError):
    """A node was asked to coerce to a scalar shape it cannot take."""


class InvalidFormat(ModelError):
    """A recognised ``type`` was paired with an unrecognised ``format``."""


class UnsupportedRootType(ModelError):
    """A named definition whose ``type`` is not ``"object"``."""


class MalformedSecurityEntry(ModelError):
    """A security requirement entry that does not have exactly one key."""


class UnsupportedConstruct(ModelError):
    """An explicit ``type: null`` or another structurally invalid declaration."""
