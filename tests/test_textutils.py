import pytest

from minishell.textutils import join_space, remove_end_char, split_path, toupper_str


def test_split_path_basic():
    assert split_path("PATH=/bin:/usr/bin") == ["/bin/", "/usr/bin/"]


def test_split_path_trailing_colon_adds_nothing():
    assert split_path("PATH=/bin:") == ["/bin/"]


def test_split_path_keeps_empty_middle_component():
    result = split_path("PATH=/a::/b")
    assert len(result) == 3
    assert result[1] == "/"


@pytest.mark.parametrize("path", ["PATH=", "NOEQUALS"])
def test_split_path_empty(path):
    assert split_path(path) == []


def test_split_path_every_entry_ends_with_slash():
    dirs = ["/x", "/y/z", "rel"]
    result = split_path("PATH=" + ":".join(dirs))
    assert result == [d + "/" for d in dirs]


def test_remove_end_char_drops_newline():
    assert remove_end_char("user\n") == "user"


def test_remove_end_char_shortens_by_one():
    for text in ["abc", "x", "hello world"]:
        assert remove_end_char(text) + text[-1] == text


def test_join_space():
    assert join_space("echo", "hi") == "echo hi"
    assert join_space("", "b").startswith(" ")


def test_toupper_str():
    assert toupper_str("hello") == "HELLO"
    assert toupper_str("MiXeD 123_!") == "MIXED 123_!"


def test_toupper_str_leaves_non_ascii():
    assert toupper_str("é") == "é"


def test_toupper_str_is_idempotent():
    text = "some Text here"
    assert toupper_str(toupper_str(text)) == toupper_str(text)