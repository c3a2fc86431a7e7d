"""Library resolver - caller side of the resolution layer.

Locates a project, partitions its libraries with a binary type filter and
turns an unresolved result into a LibraryResolveError carrying the
diagnostic. This is where resolution failures become exceptions; the
result and message modules never raise.
"""

import logging
from typing import Protocol

from ..models import BinarySpec
from ..models import LibraryComponentSelector
from ..models import LibrarySpec
from .filters import has_binary_of_type
from .filters import matching_binaries
from .messages import multiple_compatible_variants_message
from .messages import no_compatible_binary_message
from .result import LibraryResolutionResult

logger = logging.getLogger(__name__)


class ProjectLocator(Protocol):
    """Source of the libraries declared by a project."""

    def find_libraries(self, project_path: str) -> list[LibrarySpec] | None:
        """Return the project's libraries, or None if the project does not exist."""
        ...


class LibraryResolveError(Exception):
    """A library or binary could not be resolved for a selector.

    Attributes:
        selector: The request that failed
        outcome: Resolution result when the failure happened at library level
    """

    def __init__(
        self,
        message: str,
        selector: LibraryComponentSelector,
        outcome: LibraryResolutionResult | None = None,
    ):
        super().__init__(message)
        self.selector = selector
        self.outcome = outcome


class LocalLibraryResolver:
    """Resolve library selectors against projects known to a locator.

    Resolution steps:
    1. Locate the project (unknown project -> project_not_found result)
    2. Partition libraries by "has a binary of the requested type"
    3. Select by requested name, or the single match when no name is given
    4. Narrow the selected library's binaries by type and variant
    """

    def __init__(self, locator: ProjectLocator):
        self.locator = locator

    def resolve_outcome(self, selector: LibraryComponentSelector, binary_type: str | type) -> LibraryResolutionResult:
        """Build the resolution result for `selector` without raising."""
        libraries = self.locator.find_libraries(selector.project_path)
        if libraries is None:
            logger.debug(f"[library:resolve] {selector.display_name} -> project not found")
            return LibraryResolutionResult.project_not_found()
        if not libraries:
            logger.debug(f"[library:resolve] {selector.display_name} -> project declares no library")
            return LibraryResolutionResult.empty()

        names = [library.name for library in libraries]
        if len(set(names)) != len(names):
            logger.debug(f"[library:resolve] project '{selector.project_path}' declares duplicate library names")

        return LibraryResolutionResult.of(libraries, selector.library_name, has_binary_of_type(binary_type))

    def resolve_library(self, selector: LibraryComponentSelector, binary_type: str | type) -> LibrarySpec:
        """Resolve `selector` to a library.

        Raises:
            LibraryResolveError: No library could be selected
        """
        outcome = self.resolve_outcome(selector, binary_type)
        if outcome.selected is None:
            message = outcome.to_resolution_error_message(binary_type, selector)
            logger.debug(f"[library:resolve] {selector.display_name} -> unresolved: {message}")
            raise LibraryResolveError(message, selector, outcome)

        logger.debug(f"[library:resolve] {selector.display_name} -> library '{outcome.selected.name}'")
        return outcome.selected

    def resolve_binary(self, selector: LibraryComponentSelector, binary_type: str | type) -> BinarySpec:
        """Resolve `selector` to exactly one binary of `binary_type`.

        Raises:
            LibraryResolveError: No library could be selected, or the selected
                library has zero or several compatible binaries
        """
        library = self.resolve_library(selector, binary_type)
        return self.select_binary(library, selector, binary_type)

    def select_binary(
        self, library: LibrarySpec, selector: LibraryComponentSelector, binary_type: str | type
    ) -> BinarySpec:
        """Pick the single binary of an already selected library.

        Raises:
            LibraryResolveError: Zero or several binaries are compatible
        """
        candidates = matching_binaries(library, binary_type, selector.variant)

        if len(candidates) == 1:
            binary = candidates[0]
            logger.debug(f"[library:resolve] {selector.display_name} -> binary {binary.display_name}")
            return binary
        if not candidates:
            available = library.binaries
            raise LibraryResolveError(no_compatible_binary_message(library.name, available), selector)
        raise LibraryResolveError(multiple_compatible_variants_message(library.name, candidates), selector)

    def __repr__(self) -> str:
        return f"LocalLibraryResolver({self.locator!r})"


__all__ = [
    "LibraryResolveError",
    "LocalLibraryResolver",
    "ProjectLocator",
]
