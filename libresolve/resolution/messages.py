"""Resolution failure messages.

Turns an unresolved LibraryResolutionResult into the single sentence shown to
the user. The message shape is picked from an ordered decision table (first
matching row wins):

1. PROJECT_NOT_FOUND   - project could not be located
2. NO_LIBRARIES        - no name requested, project declares nothing
3. AMBIGUOUS           - no name requested, no single matching library
4. INCOMPATIBLE        - requested library exists but has no binary of the type
5. UNKNOWN_LIBRARY     - requested library does not exist (suggest candidates)

Also builds the variant level messages used once a library has been
selected but its binaries cannot be narrowed to exactly one.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable
from enum import Enum

from ..models import BinarySpec
from .result import LibraryResolutionResult


class FailureKind(str, Enum):
    """Message shape chosen for an unresolved request."""

    PROJECT_NOT_FOUND = "project_not_found"
    NO_LIBRARIES = "no_libraries"
    AMBIGUOUS = "ambiguous"
    INCOMPATIBLE = "incompatible"
    UNKNOWN_LIBRARY = "unknown_library"


_Condition = Callable[[LibraryResolutionResult, str | None], bool]

# Order matters: the first row whose condition holds decides the message.
_DECISION_TABLE: tuple[tuple[FailureKind, _Condition], ...] = (
    (FailureKind.PROJECT_NOT_FOUND, lambda outcome, name: outcome.is_project_not_found),
    (FailureKind.NO_LIBRARIES, lambda outcome, name: name is None and not outcome.has_libraries),
    (FailureKind.AMBIGUOUS, lambda outcome, name: name is None),
    (FailureKind.INCOMPATIBLE, lambda outcome, name: outcome.non_matching_selected is not None),
    (FailureKind.UNKNOWN_LIBRARY, lambda outcome, name: True),
)


def classify_failure(outcome: LibraryResolutionResult, requested_name: str | None) -> FailureKind:
    """Pick the message shape for an unresolved request."""
    for kind, condition in _DECISION_TABLE:
        if condition(outcome, requested_name):
            return kind
    raise AssertionError("decision table has no fallback row")


def format_candidates(names: Iterable[str]) -> str:
    """Quote, sort and join library names.

    Sorting happens on the quoted names using plain codepoint order, so the
    output does not depend on the locale.

    Examples:
        >>> format_candidates(["b", "a"])
        "'a', 'b'"
    """
    return ", ".join(sorted(f"'{name}'" for name in names))


def binary_type_name(binary_type: str | type) -> str:
    """Display name of a binary kind given as a string or a class."""
    if isinstance(binary_type, type):
        return binary_type.__name__
    return binary_type


def describe_failure(
    outcome: LibraryResolutionResult,
    requested_name: str | None,
    expected_binary_kind: str | type,
    project_path: str,
) -> str:
    """Build the diagnostic for a request that did not yield a usable library.

    Args:
        outcome: Result of the resolution attempt
        requested_name: Library name the caller asked for, if any
        expected_binary_kind: Binary kind the caller needs (string or class)
        project_path: Project path as shown to the user

    Returns:
        One sentence describing the failure and the valid alternatives
    """
    kind = classify_failure(outcome, requested_name)
    prefix = f"Project '{project_path}'"

    if kind is FailureKind.PROJECT_NOT_FOUND:
        return f"{prefix} not found."
    if kind is FailureKind.NO_LIBRARIES:
        return f"{prefix} doesn't define any library."
    if kind is FailureKind.AMBIGUOUS:
        candidates = format_candidates(outcome.candidate_libraries)
        return f"{prefix} contains more than one library. Please select one of {candidates}."
    if kind is FailureKind.INCOMPATIBLE:
        return (
            f"{prefix} contains a library named '{requested_name}' "
            f"but it doesn't have any binary of type {binary_type_name(expected_binary_kind)}"
        )

    candidates = outcome.candidate_libraries
    if len(candidates) == 1:
        suggestion = format_candidates(candidates)
    else:
        suggestion = f"one of {format_candidates(candidates)}"
    return f"{prefix} does not contain library '{requested_name}'. Did you want to use {suggestion}?"


def _describe_binaries(binaries: Iterable[BinarySpec], indent: str) -> list[str]:
    return [f"{indent}- {name}" for name in sorted(binary.display_name for binary in binaries)]


def multiple_compatible_variants_message(library_name: str, binaries: Iterable[BinarySpec]) -> str:
    """Message for a library exposing more than one compatible binary.

    Example:
        Multiple compatible variants found for library 'util':
            - JarBinarySpec 'java7Jar' [platform:'java7']
            - JarBinarySpec 'java8Jar' [platform:'java8']
    """
    lines = [f"Multiple compatible variants found for library '{library_name}':"]
    lines.extend(_describe_binaries(binaries, "    "))
    return "\n".join(lines)


def no_compatible_binary_message(library_name: str, binaries: Iterable[BinarySpec]) -> str:
    """Message for a library none of whose binaries is compatible.

    `binaries` are all binaries of the library; they are listed so the user
    can see what is available instead.
    """
    message = f"Cannot find a compatible variant for library '{library_name}'."
    available = _describe_binaries(binaries, "      ")
    if not available:
        return f"{message} It doesn't define any binary."
    return "\n".join([message, "    Available variants:", *available])
