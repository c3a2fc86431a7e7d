"""Tests for the libresolve CLI."""

import json
import logging
from textwrap import dedent

import pytest
from click.testing import CliRunner

from libresolve.logging_setup import JsonlHandler
from libresolve.main import cli

MANIFEST = dedent("""
    projects:
      ":app":
        libraries:
          - name: main
            binaries:
              - name: mainJar
                type: JarBinarySpec
      ":multi":
        libraries:
          - name: api
            binaries:
              - name: apiJar
                type: JarBinarySpec
          - name: impl
            binaries:
              - name: java7Jar
                type: JarBinarySpec
                variants:
                  platform: java7
              - name: java8Jar
                type: JarBinarySpec
                variants:
                  platform: java8
          - name: native
            binaries:
              - name: linuxShared
                type: SharedLibraryBinarySpec
      ":empty": {}
""")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workspace(isolated_settings):
    """Project directory holding the default manifest."""
    project = isolated_settings["project"]
    (project / "libraries.yaml").write_text(MANIFEST)
    return project


class TestResolveCommand:
    def test_resolves_single_library(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":app"])

        assert result.exit_code == 0, result.output
        assert "Library: main" in result.output
        assert "Binary: JarBinarySpec 'mainJar'" in result.output

    def test_resolves_variant(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi", "--library", "impl", "--variant", "java8"])

        assert result.exit_code == 0, result.output
        assert "JarBinarySpec 'java8Jar' [platform:'java8']" in result.output

    def test_project_not_found(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":missing"])

        assert result.exit_code == 1
        assert "Error: Project ':missing' not found." in result.output

    def test_empty_project(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":empty"])

        assert result.exit_code == 1
        assert "Error: Project ':empty' doesn't define any library." in result.output

    def test_ambiguous_project(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi"])

        assert result.exit_code == 1
        assert (
            "Error: Project ':multi' contains more than one library. Please select one of 'api', 'impl'."
            in result.output
        )

    def test_incompatible_library(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi", "-l", "native"])

        assert result.exit_code == 1
        assert (
            "Project ':multi' contains a library named 'native' but it doesn't have any binary of type JarBinarySpec"
            in result.output
        )

    def test_binary_type_option(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi", "-l", "native", "-t", "SharedLibraryBinarySpec"])

        assert result.exit_code == 0, result.output
        assert "SharedLibraryBinarySpec 'linuxShared'" in result.output

    def test_unknown_library_suggests(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi", "-l", "core"])

        assert result.exit_code == 1
        assert "Did you want to use one of 'api', 'impl'?" in result.output

    def test_multiple_variants(self, runner, workspace):
        result = runner.invoke(cli, ["resolve", ":multi", "-l", "impl"])

        assert result.exit_code == 1
        assert "Multiple compatible variants found for library 'impl':" in result.output
        assert "- JarBinarySpec 'java7Jar' [platform:'java7']" in result.output

    def test_missing_manifest(self, runner, isolated_settings):
        result = runner.invoke(cli, ["resolve", ":app", "--manifest", "nowhere.yaml"])

        assert result.exit_code == 1
        assert "Error: Manifest 'nowhere.yaml' not found" in result.output

    def test_manifest_error_is_not_read_as_markup(self, runner, isolated_settings):
        result = runner.invoke(cli, ["resolve", ":app", "--manifest", "[bold]x.yaml"])

        assert result.exit_code == 1
        assert "Error: Manifest '[bold]x.yaml' not found" in result.output

    def test_binary_type_from_settings(self, runner, workspace):
        settings_dir = workspace / ".libresolve"
        settings_dir.mkdir()
        (settings_dir / "settings.yaml").write_text("resolve:\n  binary_type: SharedLibraryBinarySpec\n")

        result = runner.invoke(cli, ["resolve", ":multi"])

        assert result.exit_code == 0, result.output
        assert "Library: native" in result.output


class TestListCommand:
    def test_lists_projects(self, runner, workspace):
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0, result.output
        for name in (":app", ":multi", ":empty", "main", "api", "impl", "native"):
            assert name in result.output

    def test_no_projects(self, runner, isolated_settings):
        (isolated_settings["project"] / "libraries.yaml").write_text("projects: {}\n")

        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0
        assert "No projects found" in result.output


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if isinstance(h, JsonlHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def test_log_file_from_environment(runner, workspace, monkeypatch, restore_root_logger):
    log_path = workspace / "logs" / "libresolve.jsonl"
    monkeypatch.setenv("LIBRESOLVE_LOG_PATH", str(log_path))

    result = runner.invoke(cli, ["resolve", ":missing"])

    assert result.exit_code == 1
    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert any(record["message"] == "Resolution failed for project ':missing'" for record in records)
