import errno
import os
import shlex

import pytest

from fehcore.utils import (
    FatalError,
    estrjoin,
    format_message,
    path_is_url,
    read_file,
    shell_escape,
    unique_filename,
    warn,
)


def test_format_message_plain():
    assert format_message("WARNING", "hello") == "feh WARNING: hello"


def test_format_message_appends_error_after_colon():
    err = OSError(errno.ENOENT, "No such file or directory")
    assert format_message("ERROR", "open failed:", err) == (
        "feh ERROR: open failed: No such file or directory"
    )


def test_format_message_ignores_error_without_colon():
    err = OSError(errno.ENOENT, "No such file or directory")
    assert format_message("ERROR", "open failed", err) == "feh ERROR: open failed"


def test_fatal_error_message_and_status():
    exc = FatalError("No files specified for background setting")
    assert str(exc) == "feh ERROR: No files specified for background setting"
    assert exc.exit_status == 2
    with pytest.raises(FatalError):
        raise exc


def test_warn_writes_to_stderr(capsys):
    warn("Can't write to somewhere")
    captured = capsys.readouterr()
    assert captured.err == "feh WARNING: Can't write to somewhere\n"
    assert captured.out == ""


def test_estrjoin():
    assert estrjoin("/", "home", ".fehbg") == "home/.fehbg"
    assert estrjoin(None, "a", "b") == "ab"
    assert estrjoin(" ") == ""
    assert estrjoin(" ", "only") == "only"


@pytest.mark.parametrize(
    "path",
    [
        "http://example.com/a.png",
        "https://example.com/a.png",
        "gopher://example.com/",
        "gophers://example.com/",
        "ftp://example.com/a.png",
        "file:///tmp/a.png",
    ],
)
def test_path_is_url_true(path):
    assert path_is_url(path) is True


@pytest.mark.parametrize("path", ["/tmp/a.png", "a.png", "http:/x", "HTTP://example.com"])
def test_path_is_url_false(path):
    assert path_is_url(path) is False


def test_unique_filename_shape_and_absence(tmp_path):
    directory = str(tmp_path) + os.sep
    name = unique_filename(directory, "x.jpg")
    assert name.startswith(f"{directory}feh_{os.getpid():06d}_")
    assert name.endswith("_x.jpg")
    assert not os.path.exists(name)


def test_unique_filename_skips_existing(tmp_path):
    directory = str(tmp_path) + os.sep
    first = unique_filename(directory, "x.jpg")
    open(first, "w").close()
    second = unique_filename(directory, "x.jpg")
    assert second != first
    assert not os.path.exists(second)


def test_read_file_strips_single_newline(tmp_path):
    path = tmp_path / "f.txt"
    path.write_bytes(b"caption text\n\n")
    assert read_file(str(path)) == "caption text\n"


def test_read_file_limit(tmp_path):
    path = tmp_path / "big.txt"
    path.write_bytes(b"a" * 5000)
    result = read_file(str(path))
    assert len(result) == 4095
    assert set(result) == {"a"}


def test_read_file_missing(tmp_path):
    assert read_file(str(tmp_path / "missing")) is None


@pytest.mark.parametrize("text", ["simple", "it's", "a b 'c' $HOME", "", "''"])
def test_shell_escape_round_trip(text):
    assert shlex.split(shell_escape(text)) == [text]


def test_shell_escape_quote_form():
    assert shell_escape("it's") == "'it'\"'\"'s'"


def test_shell_escape_truncates_long_input():
    result = shell_escape("a" * 2000)
    assert result.startswith("'") and result.endswith("'")
    assert len(result) < 1024
    assert shlex.split(result)[0] == "a" * (len(result) - 2)