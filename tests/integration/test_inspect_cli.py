"""Integration tests for scripts/inspect_document.py."""

import importlib.util
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "inspect_document.py"

spec = importlib.util.spec_from_file_location("inspect_document", SCRIPT_PATH)
inspect_document = importlib.util.module_from_spec(spec)
spec.loader.exec_module(inspect_document)

runner = CliRunner()


@pytest.mark.integration
def test_tree_command_prints_addresses():
    """Test the tree listing for the classic template."""
    result = runner.invoke(inspect_document.app, ["tree", "classic"])

    assert result.exit_code == 0
    assert "[0] row" in result.output
    assert "[2.0] entry" in result.output
    assert "[2.0.0.0] list_item" in result.output


@pytest.mark.integration
def test_tree_command_from_record_file(tmp_path):
    """Test loading a YAML document record by path."""
    path = tmp_path / "resume.yaml"
    path.write_text("children:\n  - type: section\n    data:\n      title: Skills\n")

    result = runner.invoke(inspect_document.app, ["tree", str(path)])

    assert result.exit_code == 0
    assert "[0] section (title='Skills')" in result.output


@pytest.mark.integration
def test_options_command():
    """Test printing an entry's toolbar menu."""
    result = runner.invoke(inspect_document.app, ["options", "classic", "2.0"])

    assert result.exit_code == 0
    assert "Title Options" in result.output
    assert "Add another title field" in result.output


@pytest.mark.integration
def test_options_command_without_resolver():
    """Test a node type with no menu."""
    result = runner.invoke(inspect_document.app, ["options", "classic", "0"])

    assert result.exit_code == 0
    assert "(no toolbar options)" in result.output


@pytest.mark.integration
def test_options_command_bad_address():
    """Test an address outside the document exits with an error."""
    result = runner.invoke(inspect_document.app, ["options", "classic", "9.9"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_unknown_template_exits_with_error():
    """Test a missing template exits with code 1."""
    result = runner.invoke(inspect_document.app, ["tree", "nope"])

    assert result.exit_code == 1


@pytest.mark.integration
def test_types_and_templates_commands():
    """Test the listing commands."""
    types_result = runner.invoke(inspect_document.app, ["types"])
    templates_result = runner.invoke(inspect_document.app, ["templates"])

    assert "List Item" in types_result.output
    assert "classic" in templates_result.output


@pytest.mark.integration
def test_log_dir_writes_session_log(tmp_path):
    """Test --log-dir sets up a session log with a provenance header."""
    log_dir = tmp_path / "logs"

    result = runner.invoke(inspect_document.app, ["tree", "classic", "--log-dir", str(log_dir)])

    assert result.exit_code == 0
    log_text = (log_dir / "edit.log").read_text(encoding="utf-8")
    assert "Template: classic" in log_text
    assert "[edit] Opened template 'classic'" in log_text

    logger.remove()
    logger.add(sys.stderr)
