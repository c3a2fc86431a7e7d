"""Compatibility predicates over a library's binaries."""

from __future__ import annotations

from ..models import BinarySpec
from ..models import LibrarySpec
from .messages import binary_type_name
from .result import LibraryFilter


def has_binary_of_type(binary_type: str | type) -> LibraryFilter:
    """Build a filter accepting libraries with at least one binary of `binary_type`."""
    type_name = binary_type_name(binary_type)

    def library_filter(library: LibrarySpec) -> bool:
        return any(binary.type == type_name for binary in library.binaries)

    return library_filter


def matching_binaries(
    library: LibrarySpec,
    binary_type: str | type,
    variant: str | None = None,
) -> list[BinarySpec]:
    """Binaries of `library` with the requested type and variant.

    Args:
        library: Selected library
        binary_type: Binary kind the caller needs
        variant: Variant value that must appear among a binary's dimensions
            (e.g. "java8"); None accepts every variant

    Returns:
        Compatible binaries, in declaration order
    """
    type_name = binary_type_name(binary_type)
    binaries = [binary for binary in library.binaries if binary.type == type_name]
    if variant is not None:
        binaries = [binary for binary in binaries if variant in binary.variants.values()]
    return binaries
