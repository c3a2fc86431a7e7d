"""Project registry - the libraries declared by each known project.

ProjectRegistry is the in-memory ProjectLocator used by the CLI. It is
usually built from a YAML manifest:

    projects:
      ":app":
        libraries:
          - name: util
            binaries:
              - name: java8Jar
                type: JarBinarySpec
                variants:
                  platform: java8
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import LibrarySpec

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """A project manifest could not be read or is malformed."""


class ProjectRegistry:
    """Projects and their declared libraries, keyed by project path."""

    def __init__(self, projects: dict[str, list[LibrarySpec]] | None = None):
        self._projects: dict[str, list[LibrarySpec]] = {}
        for project_path, libraries in (projects or {}).items():
            self.add_project(project_path, libraries)

    def add_project(self, project_path: str, libraries: Iterable[LibrarySpec] = ()) -> None:
        """Register a project, replacing any previous entry for the same path.

        Libraries keep their declaration order, duplicate names included.
        """
        self._projects[project_path] = list(libraries)

    def find_libraries(self, project_path: str) -> list[LibrarySpec] | None:
        """Return a copy of the project's libraries, or None if it is unknown."""
        libraries = self._projects.get(project_path)
        if libraries is None:
            return None
        return list(libraries)

    def list_projects(self) -> list[tuple[str, list[LibrarySpec]]]:
        """List (project_path, libraries) tuples sorted by project path."""
        return [(path, list(self._projects[path])) for path in sorted(self._projects)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectRegistry":
        """Build a registry from a manifest mapping.

        Raises:
            ManifestError: The mapping does not follow the manifest layout
        """
        projects = data.get("projects") or {}
        if not isinstance(projects, dict):
            raise ManifestError("Manifest 'projects' must be a mapping of project path to project")

        registry = cls()
        for project_path, project in projects.items():
            project = project or {}
            if not isinstance(project, dict):
                raise ManifestError(f"Project '{project_path}' must be a mapping")
            try:
                libraries = [LibrarySpec.model_validate(entry) for entry in project.get("libraries") or []]
            except ValidationError as e:
                raise ManifestError(f"Invalid library in project '{project_path}': {e}") from e
            registry.add_project(str(project_path), libraries)

        logger.debug(f"Loaded {len(registry._projects)} projects from manifest")
        return registry

    def __repr__(self) -> str:
        return f"ProjectRegistry({len(self._projects)} projects)"


def load_manifest(path: Path) -> ProjectRegistry:
    """Read a YAML manifest into a ProjectRegistry.

    Args:
        path: Manifest file

    Raises:
        ManifestError: File missing, not valid YAML, or malformed
    """
    if not path.exists():
        raise ManifestError(f"Manifest '{path}' not found")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"Manifest '{path}' is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest '{path}' must contain a mapping")

    logger.debug(f"Reading manifest {path}")
    return ProjectRegistry.from_dict(data)
