"""libresolve - library component resolution for build tooling.

Public API:
- LibrarySpec, BinarySpec, LibraryComponentSelector, ProjectState: value types
- LibraryResolutionResult: partitioned libraries plus the selected one
- describe_failure: diagnostic for an unresolved request
- LocalLibraryResolver: resolve selectors against a project locator
- ProjectRegistry, load_manifest: in-memory project locator and its YAML loader
"""

from .models import BinarySpec
from .models import LibraryComponentSelector
from .models import LibrarySpec
from .models import ProjectState
from .registry import ManifestError
from .registry import ProjectRegistry
from .registry import load_manifest
from .resolution import FailureKind
from .resolution import LibraryResolutionResult
from .resolution import LibraryResolveError
from .resolution import LocalLibraryResolver
from .resolution import describe_failure
from .resolution import has_binary_of_type

__all__ = [
    "BinarySpec",
    "FailureKind",
    "LibraryComponentSelector",
    "LibraryResolutionResult",
    "LibraryResolveError",
    "LibrarySpec",
    "LocalLibraryResolver",
    "ManifestError",
    "ProjectRegistry",
    "ProjectState",
    "describe_failure",
    "has_binary_of_type",
    "load_manifest",
]
