"""Resolution result - partition a project's libraries and select one.

A LibraryResolutionResult is built once per resolution attempt and never
mutated afterwards. It records which libraries satisfied the compatibility
filter, which did not, and which library (if any) was selected by name.

Nothing here raises or logs: an unresolved request is represented by
`selected` being None. Callers turn that into an error using
`to_resolution_error_message()`.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType

from ..models import LibraryComponentSelector
from ..models import LibrarySpec
from ..models import ProjectState

LibraryFilter = Callable[[LibrarySpec], bool]

_NO_LIBRARIES: Mapping[str, LibrarySpec] = MappingProxyType({})


@dataclass(frozen=True)
class LibraryResolutionResult:
    """Partitioned libraries of a project plus the selection outcome.

    Attributes:
        matching: Libraries accepted by the filter, keyed by name
        non_matching: Libraries rejected by the filter, keyed by name
        selected: Library chosen for the request, None when unresolved
        non_matching_selected: Rejected library carrying the requested name
        project_state: NORMAL, or PROJECT_NOT_FOUND for an unknown project
    """

    matching: Mapping[str, LibrarySpec] = field(default_factory=lambda: _NO_LIBRARIES)
    non_matching: Mapping[str, LibrarySpec] = field(default_factory=lambda: _NO_LIBRARIES)
    selected: LibrarySpec | None = None
    non_matching_selected: LibrarySpec | None = None
    project_state: ProjectState = ProjectState.NORMAL

    def __post_init__(self):
        if not isinstance(self.matching, MappingProxyType):
            object.__setattr__(self, "matching", MappingProxyType(dict(self.matching)))
        if not isinstance(self.non_matching, MappingProxyType):
            object.__setattr__(self, "non_matching", MappingProxyType(dict(self.non_matching)))
        if self.project_state is ProjectState.PROJECT_NOT_FOUND and (
            self.has_libraries or self.selected is not None or self.non_matching_selected is not None
        ):
            raise ValueError("A project that was not found cannot declare or select libraries")

    @property
    def is_project_not_found(self) -> bool:
        return self.project_state is ProjectState.PROJECT_NOT_FOUND

    @property
    def has_libraries(self) -> bool:
        return bool(self.matching) or bool(self.non_matching)

    @property
    def candidate_libraries(self) -> list[str]:
        """Names of the libraries eligible for selection."""
        return list(self.matching)

    def to_resolution_error_message(
        self,
        binary_type: str | type,
        selector: LibraryComponentSelector,
    ) -> str:
        """Describe why this result did not yield a usable library."""
        from .messages import describe_failure

        return describe_failure(self, selector.library_name, binary_type, selector.project_path)

    @classmethod
    def of(
        cls,
        libraries: Iterable[LibrarySpec],
        library_name: str | None,
        library_filter: LibraryFilter,
    ) -> LibraryResolutionResult:
        """Partition `libraries` with `library_filter` and select by name.

        A later library overwrites an earlier one with the same name.

        Args:
            libraries: Libraries declared by the project
            library_name: Requested library name, or None to auto-select
            library_filter: Compatibility predicate over a library

        Returns:
            Immutable resolution result
        """
        matching: dict[str, LibrarySpec] = {}
        non_matching: dict[str, LibrarySpec] = {}
        for library in libraries:
            if library_filter(library):
                matching[library.name] = library
            else:
                non_matching[library.name] = library

        selected = None
        non_matching_selected = None
        if library_name is None:
            # Only an unambiguous single match is selected implicitly
            if len(matching) == 1:
                selected = next(iter(matching.values()))
        else:
            selected = matching.get(library_name)
            non_matching_selected = non_matching.get(library_name)

        return cls(
            matching=MappingProxyType(matching),
            non_matching=MappingProxyType(non_matching),
            selected=selected,
            non_matching_selected=non_matching_selected,
        )

    @classmethod
    def project_not_found(cls) -> LibraryResolutionResult:
        """Result for a project that could not be located."""
        return _PROJECT_NOT_FOUND

    @classmethod
    def empty(cls) -> LibraryResolutionResult:
        """Result for a project that declares no library."""
        return _EMPTY


_EMPTY = LibraryResolutionResult()
_PROJECT_NOT_FOUND = LibraryResolutionResult(project_state=ProjectState.PROJECT_NOT_FOUND)


def resolve(
    libraries: Iterable[LibrarySpec],
    library_name: str | None,
    library_filter: LibraryFilter,
) -> LibraryResolutionResult:
    """Shorthand for LibraryResolutionResult.of()."""
    return LibraryResolutionResult.of(libraries, library_name, library_filter)


def project_not_found() -> LibraryResolutionResult:
    return LibraryResolutionResult.project_not_found()


def empty() -> LibraryResolutionResult:
    return LibraryResolutionResult.empty()
