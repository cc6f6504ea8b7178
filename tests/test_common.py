"""Tests for the common-directory helpers, sequence packs and the CLI."""

import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout
from unittest.mock import patch
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from prefix_abbrev import (
    common_directory,
    common_parent,
    join_sequence,
    load_sequences,
    parse_sequences,
    shortest_abbreviations,
    split_sequence,
    summarize,
)
from prefix_abbrev.cli import main


DIRS = [
    "/home/user1/tmp/coverage/test",
    "/home/user1/tmp/covert/operator",
    "/home/user1/tmp/coven/members",
]


def _write(tmpdir, name, content):
    path = os.path.join(tmpdir, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


def _run_cli(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = main(argv)
    return status, out.getvalue().splitlines()


def test_split_join_roundtrip():
    """Absolute paths keep their leading empty token."""
    assert split_sequence("/home/user1/tmp") == ["", "home", "user1", "tmp"]
    assert join_sequence(["", "home", "user1", "tmp"]) == "/home/user1/tmp"
    assert split_sequence("os.path.join", sep=".") == ["os", "path", "join"]
    print("✓ test_split_join_roundtrip")


def test_common_directory():
    """The documented example resolves to /home/user1/tmp."""
    assert common_directory(DIRS) == "/home/user1/tmp"
    print("✓ test_common_directory")


def test_common_directory_single_path():
    """A single distinct path gives its parent directory."""
    assert common_directory(["/srv/data/file.txt"]) == "/srv/data"
    assert common_directory(["/srv/data/file.txt"] * 2) == "/srv/data"
    assert common_directory(["/srv"]) == "/"
    print("✓ test_common_directory_single_path")


def test_common_directory_at_root():
    """Paths diverging right below the root share "/"."""
    assert common_directory(["/a/x", "/b/y"]) == "/"
    assert common_directory(["/a", "/a/b"]) == "/"
    assert common_directory(["a.x", "b.y"], sep=".") == ""

    status, lines = _run_cli(["--common", "/a/x", "/b/y"])
    assert status == 0
    assert lines == ["/"]
    print("✓ test_common_directory_at_root")


def test_common_directory_requires_paths():
    """No paths at all is a caller error."""
    try:
        common_directory([])
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")
    print("✓ test_common_directory_requires_paths")


def test_common_parent_tokens():
    """Token-level variant works on pre-split sequences."""
    seqs = [["pkg", "mod", "a"], ["pkg", "mod", "b"], ["pkg", "other"]]
    assert common_parent(seqs) == ["pkg"]
    print("✓ test_common_parent_tokens")


def test_shortest_keeps_ties():
    """All minimal-length abbreviations survive, in order."""
    abbrevs = [["a", "b", "c"], ["a", "e"], ["f", "g"]]
    assert shortest_abbreviations(abbrevs) == [["a", "e"], ["f", "g"]]
    assert shortest_abbreviations([]) == []
    print("✓ test_shortest_keeps_ties")


def test_summarize_metrics():
    """summarize() reports token savings over distinct sequences."""
    seqs = [["x", "long", "tail"], ["y", "other", "tail"], ["x", "long", "tail"]]
    result = summarize(seqs)
    assert result.abbreviations == [["x"], ["y"]]
    assert result.sequences == 3
    assert result.distinct_sequences == 2
    assert result.original_tokens == 6
    assert result.abbreviated_tokens == 2
    assert result.tokens_saved == 4
    assert result.savings_pct == 66.7
    assert result.shortest == [["x"], ["y"]]
    print(f"✓ test_summarize_metrics ({result.savings_pct}% savings)")


def test_summarize_single_sequence():
    """Nothing to distinguish means nothing saved."""
    result = summarize([["a", "b"]])
    assert result.abbreviations == []
    assert result.tokens_saved == 0
    assert result.savings_pct == 0
    print("✓ test_summarize_single_sequence")


def test_load_json_pack():
    """JSON packs mix path strings and token lists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "paths.json", json.dumps([DIRS[0], ["", "etc", "hosts"]]))
        seqs = load_sequences(path)
    assert seqs == [split_sequence(DIRS[0]), ["", "etc", "hosts"]]
    print("✓ test_load_json_pack")


def test_load_text_pack():
    """Text packs hold one entry per line; blank lines are skipped."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "paths.txt", "\n".join(DIRS) + "\n\n")
        seqs = load_sequences(path)
    assert seqs == [split_sequence(d) for d in DIRS]
    print("✓ test_load_text_pack")


def test_load_missing_pack():
    """A missing file raises FileNotFoundError."""
    try:
        load_sequences("/nonexistent/paths.json")
    except FileNotFoundError as e:
        assert "not found" in str(e)
    else:
        raise AssertionError("expected FileNotFoundError")
    print("✓ test_load_missing_pack")


def test_malformed_entries_rejected():
    """Non-string tokens, empty sequences and non-list roots are errors."""
    for bad in ([["a", 1]], [[]], [42], {"a": "b"}):
        try:
            parse_sequences(bad)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {bad!r}")
    print("✓ test_malformed_entries_rejected")


def test_cli_abbreviations():
    """The CLI prints one abbreviation per line."""
    status, lines = _run_cli(DIRS)
    assert status == 0
    assert lines == [
        "/home/user1/tmp/coven",
        "/home/user1/tmp/coverage",
        "/home/user1/tmp/covert",
    ]
    print("✓ test_cli_abbreviations")


def test_cli_common_and_sep():
    """--common prints the shared directory; --sep changes the separator."""
    status, lines = _run_cli(["--common"] + DIRS)
    assert status == 0
    assert lines == ["/home/user1/tmp"]

    status, lines = _run_cli(["--sep", ".", "--shortest", "os.path.join", "os.path.split", "os.environ"])
    assert status == 0
    assert lines == ["os.environ"]
    print("✓ test_cli_common_and_sep")


def test_cli_file_errors():
    """Unreadable or malformed packs exit with status 1."""
    assert _run_cli(["--file", "/nonexistent/paths.json"])[0] == 1
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "bad.json", "{not json")
        assert _run_cli(["--file", path])[0] == 1
        with patch("prefix_abbrev.cli.load_sequences", side_effect=PermissionError(13, "Permission denied", path)):
            assert _run_cli(["--file", path])[0] == 1
    print("✓ test_cli_file_errors")


if __name__ == "__main__":
    test_split_join_roundtrip()
    test_common_directory()
    test_common_directory_single_path()
    test_common_directory_at_root()
    test_common_directory_requires_paths()
    test_common_parent_tokens()
    test_shortest_keeps_ties()
    test_summarize_metrics()
    test_summarize_single_sequence()
    test_load_json_pack()
    test_load_text_pack()
    test_load_missing_pack()
    test_malformed_entries_rejected()
    test_cli_abbreviations()
    test_cli_common_and_sep()
    test_cli_file_errors()
    print("\n🎉 All tests passed!")
