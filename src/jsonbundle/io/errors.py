"""
Custom exceptions for the jsonbundle.io module.

Purpose
- Provide loader-specific error types, separate from the codec errors in jsonbundle.core.errors.
- Keep "resource is missing" and "resource could not be read" distinguishable from
  "resource is not valid JSON" (the latter is jsonbundle.core.errors.DecodeError).

Mapping
- NotFoundError: the bundle has no resource for the requested name (also a LookupError).
- ReadError: the resource was resolved but reading its bytes failed (also an OSError).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations

from jsonbundle.core.errors import JsonError


class LoaderError(JsonError):
    """
    Base class for resource loading errors in jsonbundle.io.

    Notes:
        Decode failures are not LoaderErrors; catch JsonError to handle both.
    """


class NotFoundError(LoaderError, LookupError):
    """
    Raised when a named resource does not exist in the given bundle.

    Examples:
        - load_json("missing", bundle) with no missing.json under the bundle root
        - An empty or malformed resource name
    """


class ReadError(LoaderError, OSError):
    """
    Raised when a resolved resource cannot be read.

    Notes:
        The underlying OSError (permissions, file removed after resolution,
        path is a directory) is chained as __cause__.
    """
