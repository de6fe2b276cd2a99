"""Integration tests for the CLI."""

from pathlib import Path

from githubql_enums.utils.yaml import dump_yaml_to_file, load_yaml_file
from tests.integration.utils import run_cli


def test_list_types() -> None:
    """list-types prints every enum type with its member count."""
    result = run_cli(["list-types"])
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 42
    assert "IssueState (2 members)" in lines
    assert "PullRequestState (3 members)" in lines


def test_show_type() -> None:
    """show prints the description and members of a type."""
    result = run_cli(["show", "PullRequestState"])
    assert result.returncode == 0
    assert "PullRequestState: The possible states of a pull request." in result.stdout
    assert '"MERGED"  A pull request that has been closed by being merged.' in result.stdout


def test_show_unknown_type() -> None:
    """show exits with an error for an unknown type."""
    result = run_cli(["show", "PullRequestStatus"])
    assert result.returncode == 1
    assert "Unknown enum type: PullRequestStatus" in result.stderr


def test_check_valid_value() -> None:
    """check prints the symbolic name of a valid wire value."""
    result = run_cli(["check", "PullRequestState", "MERGED"])
    assert result.returncode == 0
    assert result.stdout.strip() == "MERGED"


def test_check_invalid_value() -> None:
    """check exits with an error for an unknown or wrongly cased wire value."""
    for value in ["DRAFT", "merged"]:
        result = run_cli(["check", "PullRequestState", value])
        assert result.returncode == 1
        assert "is not a known value of enum type PullRequestState" in result.stderr


def test_check_missing_value_argument() -> None:
    """check requires a value argument."""
    result = run_cli(["check", "IssueState"])
    assert result.returncode == 2
    assert "missing argument" in result.stderr.lower()


def test_export_then_diff(tmp_path: Path) -> None:
    """A freshly exported snapshot matches the installed table."""
    snapshot_file = tmp_path / "enums.yaml"
    result = run_cli(["export", str(snapshot_file)], cwd=str(tmp_path))
    assert result.returncode == 0
    assert "Exported 42 enum types" in result.stdout
    assert snapshot_file.exists()

    result = run_cli(["diff", str(snapshot_file)], cwd=str(tmp_path))
    assert result.returncode == 0
    assert "Enum types match snapshot" in result.stdout


def test_diff_reports_drift(tmp_path: Path) -> None:
    """diff lists values the snapshot lacks and exits with status 1."""
    snapshot_file = tmp_path / "enums.yaml"
    assert run_cli(["export", str(snapshot_file)], cwd=str(tmp_path)).returncode == 0

    content = load_yaml_file(snapshot_file)
    for enum_type in content["enum_types"]:
        if enum_type["name"] == "PullRequestState":
            enum_type["members"] = [member for member in enum_type["members"] if member["value"] != "MERGED"]
    dump_yaml_to_file(content, snapshot_file)

    result = run_cli(["diff", str(snapshot_file)], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "+ PullRequestState: MERGED" in result.stdout


def test_diff_missing_snapshot(tmp_path: Path) -> None:
    """diff exits with an error when the snapshot does not exist."""
    result = run_cli(["diff", str(tmp_path / "missing.yaml")], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "Snapshot file not found" in result.stderr


def test_diff_malformed_snapshot(tmp_path: Path) -> None:
    """diff exits with an error when the snapshot is not valid YAML."""
    snapshot_file = tmp_path / "bad.yaml"
    snapshot_file.write_text("not: [valid: yaml", encoding="utf-8")
    result = run_cli(["diff", str(snapshot_file)], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "Invalid enum registry snapshot" in result.stderr


def test_diff_non_utf8_snapshot(tmp_path: Path) -> None:
    """diff reports a snapshot that is not UTF-8 text without a traceback."""
    snapshot_file = tmp_path / "binary.yaml"
    snapshot_file.write_bytes(b"enum_types:\n  - name: \xff\xfe\n")
    result = run_cli(["diff", str(snapshot_file)], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "Invalid enum registry snapshot" in result.stderr
    assert "Traceback" not in result.stderr


def test_diff_directory_instead_of_snapshot(tmp_path: Path) -> None:
    """diff rejects a directory path without a traceback."""
    result = run_cli(["diff", str(tmp_path)], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "Snapshot file not found" in result.stderr
    assert "Traceback" not in result.stderr


def test_export_to_missing_directory(tmp_path: Path) -> None:
    """export reports an unwritable path without a traceback."""
    result = run_cli(["export", str(tmp_path / "no" / "enums.yaml")], cwd=str(tmp_path))
    assert result.returncode == 1
    assert "Failed to write snapshot file" in result.stderr
    assert "Traceback" not in result.stderr
