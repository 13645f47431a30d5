from unittest import mock

import pytest

from studycards.utility import clear_screen, is_continue


@pytest.mark.parametrize(
    "answer, expected",
    [
        ("y", True),
        ("Y", True),
        ("yes", True),
        ("no", True),
        ("", False),
        ("n", False),
        ("N", False),
    ],
)
def test_is_continue(answer, expected):
    assert is_continue(answer) is expected


def test_clear_screen_runs_clear_on_posix(capsys):
    with mock.patch("studycards.utility.os.name", "posix"), mock.patch(
        "studycards.utility.subprocess.run"
    ) as run:
        clear_screen()
    assert run.call_args_list == [mock.call(["clear"], check=False)]
    assert capsys.readouterr().out == ""


def test_clear_screen_runs_cls_on_windows(capsys):
    with mock.patch("studycards.utility.os.name", "nt"), mock.patch(
        "studycards.utility.subprocess.run"
    ) as run:
        clear_screen()
    assert run.call_args_list == [mock.call("cls", shell=True, check=False)]
    assert capsys.readouterr().out == ""


def test_clear_screen_falls_back_to_escape_codes(capsys):
    with mock.patch("studycards.utility.os.name", "posix"), mock.patch(
        "studycards.utility.subprocess.run", side_effect=FileNotFoundError
    ):
        clear_screen()
    assert capsys.readouterr().out == "\033[H\033[2J"