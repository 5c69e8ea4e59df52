import pytest

from pipeline2.paths import parse_command, resolve_command, search_path, split_fields


def test_split_fields_collapses_separators():
    assert split_fields("  a b  c ", " ") == ["a", "b", "c"]


def test_split_fields_no_separator():
    assert split_fields("word", " ") == ["word"]


@pytest.mark.parametrize("text", ["", "::::", ":"])
def test_split_fields_empty_results(text):
    assert split_fields(text, ":") == []


def test_split_fields_rejoin_invariant():
    text = "x:yy::zzz:"
    fields = split_fields(text, ":")
    assert ":".join(fields) == "x:yy:zzz"
    assert all(fields)


def test_split_fields_bad_separator():
    with pytest.raises(ValueError):
        split_fields("a,b", ",,")


def test_search_path_splits_directories():
    assert search_path({"HOME": "/home/x", "PATH": "/bin::/usr/bin"}) == ["/bin", "/usr/bin"]


def test_search_path_missing():
    assert search_path({"HOME": "/home/x"}) is None


def test_search_path_empty_value():
    assert search_path({"PATH": ""}) == []


def test_resolve_command_first_existing(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    (second / "tool").write_text("")
    (first / "other").write_text("")
    assert resolve_command([str(first), str(second)], "tool") == f"{second}/tool"


def test_resolve_command_prefers_earlier(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    for d in (first, second):
        d.mkdir()
        (d / "tool").write_text("")
    assert resolve_command([str(first), str(second)], "tool") == f"{first}/tool"


def test_resolve_command_missing_returns_last_candidate(tmp_path):
    dirs = [str(tmp_path / "x"), str(tmp_path / "y")]
    assert resolve_command(dirs, "nothing") == f"{dirs[-1]}/nothing"


@pytest.mark.parametrize("dirs", [[], None])
def test_resolve_command_without_directories(dirs):
    assert resolve_command(dirs, "ls") is None


def test_parse_command():
    assert parse_command("grep  -v   foo") == ["grep", "-v", "foo"]


@pytest.mark.parametrize("cmd", ["", "   "])
def test_parse_command_empty(cmd):
    with pytest.raises(ValueError):
        parse_command(cmd)