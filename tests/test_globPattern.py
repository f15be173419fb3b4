import pytest

from pathexpand.globPattern import has_wildcard, split_directory_and_pattern


@pytest.mark.parametrize("pattern", ["data/*.csv", "logs/202?.log", "file[0-9].txt", "[", "*"])
def test_has_wildcard_detects_metacharacters(pattern):
    assert has_wildcard(pattern)


@pytest.mark.parametrize("pattern", ["README.md", "data/a.csv", "", "dir/sub/file]", "{a,b}.txt"])
def test_has_wildcard_ignores_plain_paths(pattern):
    assert not has_wildcard(pattern)


def test_escaped_bracket_still_counts_as_wildcard():
    assert has_wildcard("report\\[draft].txt")


def test_split_uses_last_separator():
    assert split_directory_and_pattern("data/raw/*.csv") == ("data/raw", "*.csv")


def test_split_without_separator_scans_current_directory():
    assert split_directory_and_pattern("*.csv") == (".", "*.csv")


def test_split_leading_separator_leaves_empty_directory():
    assert split_directory_and_pattern("/*.log") == ("", "*.log")


def test_split_ignores_backslash_with_posix_separators():
    assert split_directory_and_pattern("data\\raw\\*.csv") == (".", "data\\raw\\*.csv")


def test_split_accepts_either_windows_separator():
    assert split_directory_and_pattern("data\\raw/*.csv", "/\\") == ("data\\raw", "*.csv")
    assert split_directory_and_pattern("data/raw\\*.csv", "/\\") == ("data/raw", "*.csv")
