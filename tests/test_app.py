import pytest

from subjectfinder.app import main, tab_title


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("/home/user/data/students.txt", "students.txt"),
        ("students.txt", "students.txt"),
        ("relative/dir/list.txt", "list.txt"),
    ],
)
def test_tab_title_takes_last_component(filename, expected):
    assert tab_title(filename) == expected


def test_tab_title_of_trailing_slash_is_empty():
    assert tab_title("folder/") == ""


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "subjectfinder" in capsys.readouterr().out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2