"""Tests for resolution.filters."""

from libresolve.models import BinarySpec
from libresolve.models import LibrarySpec
from libresolve.resolution.filters import has_binary_of_type
from libresolve.resolution.filters import matching_binaries

JAVA7 = BinarySpec(name="java7Jar", type="JarBinarySpec", variants={"platform": "java7"})
JAVA8 = BinarySpec(name="java8Jar", type="JarBinarySpec", variants={"platform": "java8"})
NATIVE = BinarySpec(name="linuxShared", type="SharedLibraryBinarySpec", variants={"platform": "linux"})


class NativeBinarySpec:
    pass


class TestHasBinaryOfType:
    def test_accepts_library_with_type(self):
        library = LibrarySpec(name="util", binaries=[NATIVE, JAVA8])

        assert has_binary_of_type("JarBinarySpec")(library)

    def test_rejects_library_without_type(self):
        library = LibrarySpec(name="util", binaries=[NATIVE])

        assert not has_binary_of_type("JarBinarySpec")(library)

    def test_rejects_library_without_binaries(self):
        assert not has_binary_of_type("JarBinarySpec")(LibrarySpec(name="empty"))

    def test_type_given_as_class(self):
        library = LibrarySpec(name="util", binaries=[BinarySpec(name="n", type="NativeBinarySpec")])

        assert has_binary_of_type(NativeBinarySpec)(library)


class TestMatchingBinaries:
    def test_filters_by_type_in_declaration_order(self):
        library = LibrarySpec(name="util", binaries=[JAVA8, NATIVE, JAVA7])

        assert matching_binaries(library, "JarBinarySpec") == [JAVA8, JAVA7]

    def test_filters_by_variant(self):
        library = LibrarySpec(name="util", binaries=[JAVA7, JAVA8])

        assert matching_binaries(library, "JarBinarySpec", "java8") == [JAVA8]

    def test_unknown_variant(self):
        library = LibrarySpec(name="util", binaries=[JAVA7, JAVA8])

        assert matching_binaries(library, "JarBinarySpec", "java11") == []
