"""Data models for library resolution.

Defines the value types shared by the resolution layer:
- BinarySpec: A buildable binary variant produced by a library
- LibrarySpec: A named library declared by a project
- LibraryComponentSelector: What the caller asked for
- ProjectState: Whether the project behind a resolution could be located
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ProjectState(str, Enum):
    """State of the project a resolution was attempted against.

    States:
    - NORMAL: Project was located (it may still declare no library)
    - PROJECT_NOT_FOUND: Project could not be located
    """

    NORMAL = "normal"
    PROJECT_NOT_FOUND = "project_not_found"


class BinarySpec(BaseModel):
    """A binary variant exposed by a library."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Binary name, unique within its library")
    type: str = Field(description="Binary kind display name (e.g. JarBinarySpec)")
    variants: dict[str, str] = Field(default_factory=dict, description="Variant dimensions (e.g. platform)")

    @property
    def display_name(self) -> str:
        """Human readable form used in diagnostics.

        Examples:
            >>> BinarySpec(name="mainJar", type="JarBinarySpec").display_name
            "JarBinarySpec 'mainJar'"
            >>> BinarySpec(name="java8Jar", type="JarBinarySpec", variants={"platform": "java8"}).display_name
            "JarBinarySpec 'java8Jar' [platform:'java8']"
        """
        text = f"{self.type} '{self.name}'"
        if self.variants:
            dimensions = ", ".join(f"{key}:'{value}'" for key, value in sorted(self.variants.items()))
            text += f" [{dimensions}]"
        return text


class LibrarySpec(BaseModel):
    """A library declared by a project.

    Attributes:
        name: Library name, unique within its project
        binaries: Binary variants the library can produce
    """

    model_config = ConfigDict(frozen=True)

    name: str
    binaries: list[BinarySpec] = Field(default_factory=list)


class LibraryComponentSelector(BaseModel):
    """Request for a library of a project.

    Only `library_name` takes part in selection. `project_path` is display
    text for diagnostics and `variant` narrows binary matching once a
    library has been selected.
    """

    model_config = ConfigDict(frozen=True)

    project_path: str
    library_name: str | None = None
    variant: str | None = None

    @property
    def display_name(self) -> str:
        text = f"project '{self.project_path}'"
        if self.library_name is not None:
            text += f" library '{self.library_name}'"
        return text
