import pytest

from xmltally.cli import main, EXIT_OK, EXIT_INVALID_ROOT
from tests.conftest import MALFORMED


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_full_scan_report(record_tree, capsys):
    code, out, _ = run(capsys, "--directory", str(record_tree), "--tag-name", "RecordID", "--no-color")

    assert code == EXIT_OK
    assert "Total occurrences  : 3" in out
    assert "a.xml: 2" in out
    assert "b.xml: 1" in out


def test_zero_matches_still_exits_zero(record_tree, capsys):
    code, out, _ = run(capsys, "-d", str(record_tree), "-t", "RecordId")

    assert code == EXIT_OK
    assert "Total occurrences  : 0" in out
    assert "Troubleshooting:" in out


def test_missing_directory_exits_non_zero(tmp_path, capsys):
    code, out, err = run(capsys, "-d", str(tmp_path / "missing"), "-t", "RecordID")

    assert code == EXIT_INVALID_ROOT
    assert out == ""
    assert "Scan root not found" in err


def test_file_as_directory_exits_non_zero(write_file, capsys):
    path = write_file("a.xml", "<a/>")

    code, _, err = run(capsys, "-d", str(path), "-t", "RecordID")

    assert code == EXIT_INVALID_ROOT
    assert "not a directory" in err


def test_custom_extensions(record_tree, write_file, capsys):
    write_file("extra.data", "<RecordID/>")

    code, out, _ = run(capsys, "-d", str(record_tree), "-t", "RecordID", "--extensions", "*.data")

    assert code == EXIT_OK
    assert "Total occurrences  : 1" in out
    assert "File patterns      : *.data" in out


def test_malformed_file_is_reported_and_skipped(record_tree, write_file, capsys):
    write_file("broken.xml", MALFORMED)

    code, out, err = run(capsys, "-d", str(record_tree), "-t", "RecordID")

    assert code == EXIT_OK
    assert "Files skipped      : 1" in out
    assert "broken.xml: mismatched tag" in out
    assert "Skipping" in err


def test_show_debug_prints_sample(record_tree, capsys):
    code, out, _ = run(capsys, "-d", str(record_tree), "-t", "RecordID", "--show-debug")

    assert code == EXIT_OK
    assert "Debug information" in out
    assert "Root element       : Batch" in out
    assert "local=RecordID" in out


def test_show_progress_writes_to_stderr(record_tree, capsys):
    code, out, err = run(capsys, "-d", str(record_tree), "-t", "RecordID", "--show-progress")

    assert code == EXIT_OK
    assert "Scanning" in err
    assert "Scanning" not in out


@pytest.mark.parametrize("argv", [
    ["-t", "RecordID"],
    ["-d", "."],
    ["-d", ".", "-t", "RecordID", "--extensions", " , "],
    ["-d", ".", "-t", "  "],
])
def test_usage_errors_exit_two(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
