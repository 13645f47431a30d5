import io

import pytest

from studycards.flashcards import FlashcardManager
from studycards.menus import (
    Menu,
    create_menu,
    exit_program,
    main,
    main_menu,
    practice_menu,
    prompt_wizard,
    start_line_upload,
)


def make_manager(tmp_path, text=""):
    return FlashcardManager(
        tmp_path / "library.txt",
        tmp_path / "dump.txt",
        stdin=io.StringIO(text),
        stdout=io.StringIO(),
        clear=lambda: None,
    )


def seed_library(tmp_path, *pairs):
    records = "".join(
        f"ID: {number}\nQuestion: {question}\nAnswer: {answer}\n"
        for number, (question, answer) in enumerate(pairs)
    )
    (tmp_path / "library.txt").write_text(records, encoding="utf-8")
    (tmp_path / "dump.txt").write_text("", encoding="utf-8")


def output(manager):
    return manager._stdout.getvalue()


def test_menu_render_numbers_options():
    menu = Menu("Main Menu", ["View", "Exit"])
    assert menu.render() == "Main Menu\n  1. View\n  2. Exit\n\n"


def test_menu_display_writes_render():
    menu = Menu("Practice Flashcards", ["Rotate", "Select"])
    out = io.StringIO()
    menu.display(out)
    assert out.getvalue() == menu.render()


def test_main_menu_first_run_creates_files(tmp_path):
    manager = make_manager(tmp_path, "5\n")
    main_menu(manager)
    assert (tmp_path / "library.txt").read_text(encoding="utf-8") == ""
    assert (tmp_path / "dump.txt").exists()
    assert "Exiting..." in output(manager)


def test_main_menu_view_shows_cards(tmp_path):
    seed_library(tmp_path, ("Capital of France", "Paris"))
    manager = make_manager(tmp_path, "1\n\n5\n")
    main_menu(manager)
    assert "Question: Capital of France" in output(manager)
    assert "Answer: Paris" in output(manager)


def test_main_menu_invalid_choice(tmp_path):
    manager = make_manager(tmp_path, "9\nabc\n5\n")
    main_menu(manager)
    assert output(manager).count("Invalid input. Please select a valid option.") == 2


def test_main_menu_delete_removes_and_saves(tmp_path):
    seed_library(tmp_path, ("q1", "a1"), ("q2", "a2"))
    manager = make_manager(tmp_path, "4\n1\n5\n")
    main_menu(manager)
    assert [c.question for c in manager] == ["q2"]
    library = (tmp_path / "library.txt").read_text(encoding="utf-8")
    assert "q1" not in library
    assert "Question: q2" in library


def test_main_menu_delete_invalid_number(tmp_path):
    seed_library(tmp_path, ("q1", "a1"))
    manager = make_manager(tmp_path, "4\n9\n5\n")
    main_menu(manager)
    assert "Invalid card number: 9" in output(manager)
    assert manager.card_count() == 1


def test_main_menu_eof_raises(tmp_path):
    manager = make_manager(tmp_path, "")
    with pytest.raises(EOFError):
        main_menu(manager)


def test_practice_menu_without_cards(tmp_path):
    manager = make_manager(tmp_path)
    practice_menu(manager)
    assert output(manager).startswith("No cards in library!\n0\n")


def test_practice_menu_back(tmp_path):
    manager = make_manager(tmp_path, "5\n")
    manager.create_flashcard("q", "a")
    practice_menu(manager)
    assert "Returning to Main Menu..." in output(manager)


def test_practice_menu_rotate(tmp_path):
    manager = make_manager(tmp_path, "1\n\n\nn\n5\n")
    manager.create_flashcard("question text", "answer text")
    practice_menu(manager)
    text = output(manager)
    assert "question text\n" in text
    assert "  answer text\n" in text


def test_practice_menu_exit_saves_and_exits(tmp_path):
    manager = make_manager(tmp_path, "6\n")
    manager.create_flashcard("q", "a")
    with pytest.raises(SystemExit):
        practice_menu(manager)
    assert "Question: q" in (tmp_path / "library.txt").read_text(encoding="utf-8")


def test_create_menu_back(tmp_path):
    manager = make_manager(tmp_path, "7\n4\n")
    create_menu(manager)
    assert "Invalid input." in output(manager)
    assert manager.card_count() == 0


def test_create_menu_line_upload(tmp_path):
    manager = make_manager(tmp_path, "2\nCapital: Paris\n\n4\n")
    create_menu(manager)
    assert [(c.question, c.answer) for c in manager] == [("Capital", "Paris")]


def test_create_menu_exit(tmp_path):
    manager = make_manager(tmp_path, "5\n")
    with pytest.raises(SystemExit):
        create_menu(manager)
    assert (tmp_path / "library.txt").exists()


def test_start_line_upload_adds_valid_lines(tmp_path):
    manager = make_manager(tmp_path, "Capital: Paris\nno separator\nq:\n\n")
    start_line_upload(manager)
    assert [c.question for c in manager] == ["Capital"]
    assert "Please provide a question/answer pair" in output(manager)
    assert "Question: Capital" in (tmp_path / "library.txt").read_text(encoding="utf-8")


def test_prompt_wizard_creates_cards_and_saves(tmp_path):
    manager = make_manager(tmp_path, "Q1\nA1\nQ2\nA2\nQ3\n\n")
    prompt_wizard(manager)
    assert [(c.question, c.answer) for c in manager] == [("Q1", "A1"), ("Q2", "A2")]
    assert [c.id for c in manager] == [0, 1]
    library = (tmp_path / "library.txt").read_text(encoding="utf-8")
    assert "Question: Q2\nAnswer: A2\n" in library


def test_exit_program_writes_library(tmp_path):
    manager = make_manager(tmp_path)
    manager.create_flashcard("q", "a")
    exit_program(manager)
    assert (tmp_path / "library.txt").read_text(encoding="utf-8") == "ID: 0\nQuestion: q\nAnswer: a\n"


def test_main_saves_on_end_of_input(tmp_path, monkeypatch):
    seed_library(tmp_path, ("q", "a"))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    result = main(["--library", str(tmp_path / "library.txt"), "--dump", str(tmp_path / "dump.txt")])
    assert result == 0
    assert "Question: q\nAnswer: a\n" in (tmp_path / "library.txt").read_text(encoding="utf-8")


def test_main_exit_option(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    result = main(["--library", str(tmp_path / "library.txt"), "--dump", str(tmp_path / "dump.txt")])
    assert result == 0
    assert "Exiting..." in capsys.readouterr().out
    assert (tmp_path / "dump.txt").exists()