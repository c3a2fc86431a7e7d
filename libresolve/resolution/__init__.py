"""Library resolution.

Partitions a project's libraries against a compatibility filter, selects at
most one of them, and explains the outcome when nothing could be selected.
"""

from .filters import has_binary_of_type
from .filters import matching_binaries
from .messages import FailureKind
from .messages import classify_failure
from .messages import describe_failure
from .messages import format_candidates
from .messages import multiple_compatible_variants_message
from .messages import no_compatible_binary_message
from .resolvers import LibraryResolveError
from .resolvers import LocalLibraryResolver
from .resolvers import ProjectLocator
from .result import LibraryFilter
from .result import LibraryResolutionResult
from .result import empty
from .result import project_not_found
from .result import resolve

__all__ = [
    "FailureKind",
    "LibraryFilter",
    "LibraryResolutionResult",
    "LibraryResolveError",
    "LocalLibraryResolver",
    "ProjectLocator",
    "classify_failure",
    "describe_failure",
    "empty",
    "format_candidates",
    "has_binary_of_type",
    "matching_binaries",
    "multiple_compatible_variants_message",
    "no_compatible_binary_message",
    "project_not_found",
    "resolve",
]
