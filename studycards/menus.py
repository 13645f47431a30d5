"""Interactive menus of the flashcard study tool."""

import argparse
import sys
import time
from dataclasses import dataclass, field

from studycards.flashcards import FlashcardManager
from studycards.parser import bulk_upload, parse_line


@dataclass
class Menu:
    """A titled, numbered list of options."""

    name: str
    options: list = field(default_factory=list)

    def render(self):
        lines = [self.name]
        lines.extend(f"  {number}. {option}" for number, option in enumerate(self.options, start=1))
        return "\n".join(lines) + "\n\n"

    def display(self, stdout=None):
        out = stdout if stdout is not None else sys.stdout
        out.write(self.render())
        out.flush()


def _say(manager, text=""):
    print(text, file=manager._stdout)


def _read(manager):
    line = manager._stdin.readline()
    if not line:
        raise EOFError("input closed")
    return line.rstrip("\r\n")


def _choose(manager, menu):
    manager._clear()
    menu.display(manager._stdout)
    try:
        return int(_read(manager))
    except ValueError:
        return None


def _delete(manager):
    manager.display_all_cards()
    entry = _read(manager)
    if not entry:
        return
    try:
        manager.remove_flashcard(int(entry) - 1)
    except (ValueError, IndexError):
        _say(manager, f"Invalid card number: {entry}")
        return
    manager.write_library_to_storage()


def main_menu(manager):
    """Load the library and run the main menu until the user exits."""
    manager.read_from_storage()
    menu = Menu("Main Menu", ["View", "Practice", "Create", "Delete", "Exit"])
    while True:
        choice = _choose(manager, menu)
        if choice == 1:
            manager.display_all_cards()
            _read(manager)
        elif choice == 2:
            practice_menu(manager)
        elif choice == 3:
            create_menu(manager)
        elif choice == 4:
            _delete(manager)
        elif choice == 5:
            _say(manager, "Exiting...")
            exit_program(manager)
            return
        else:
            _say(manager, "Invalid input. Please select a valid option.")


def practice_menu(manager):
    """Offer the practice modes; returns to the caller on "Back to Main Menu"."""
    if not manager.has_cards():
        _say(manager, "No cards in library!")
        _say(manager, str(manager.card_count()))
        time.sleep(1)
        manager._clear()
        return

    menu = Menu(
        "Practice Flashcards",
        ["Rotate", "Select", "Shuffle", "Range", "Back to Main Menu", "Exit"],
    )
    sessions = {
        1: manager.rotate_through_cards,
        2: manager.selected_practice,
        3: manager.shuffle_cards,
        4: manager.range_select,
    }
    while True:
        choice = _choose(manager, menu)
        if choice in sessions:
            try:
                sessions[choice]()
            except (ValueError, IndexError):
                _say(manager, "Invalid input.")
        elif choice == 5:
            _say(manager, "Returning to Main Menu...")
            return
        elif choice == 6:
            _say(manager, "Exiting...")
            exit_program(manager)
            raise SystemExit(0)
        else:
            _say(manager, "Invalid input.")


def create_menu(manager):
    """Offer the ways to add cards; returns on "Back to Main Menu"."""
    menu = Menu(
        "Create or Upload a Flashcard",
        ["Batch Upload", "Line Upload", "Prompt Wizard", "Back to Main Menu", "Exit"],
    )
    while True:
        choice = _choose(manager, menu)
        if choice == 1:
            bulk_upload(manager)
        elif choice == 2:
            start_line_upload(manager)
        elif choice == 3:
            prompt_wizard(manager)
        elif choice == 4:
            return
        elif choice == 5:
            exit_program(manager)
            raise SystemExit(0)
        else:
            _say(manager, "Invalid input.")


def exit_program(manager):
    """Save the library before leaving."""
    manager.write_library_to_storage()


def start_line_upload(manager):
    """Read "question: answer" lines until an empty one, saving each card."""
    manager._clear()
    _say(
        manager,
        "Enter a colon-separated line that you'd like to parse into a flashcard "
        "(Enter to exit): \n",
    )
    while True:
        entry = _read(manager)
        if entry == "":
            return
        try:
            card = parse_line(entry, manager.next_id(), ":")
        except ValueError as exc:
            _say(manager, str(exc))
            continue
        if card.answer != "":
            manager.add_flashcard(card)
            manager.write_library_to_storage()


def prompt_wizard(manager):
    """Ask for question and answer pairs until one is left empty, then save."""
    _say(
        manager,
        "Enter a question and answer pair below to create a flashcard\n"
        "Press enter on an empty line to return.",
    )
    while True:
        manager._clear()
        _say(manager, "Enter a question: ")
        question = _read(manager)
        if question == "":
            manager.write_library_to_storage()
            return

        _say(manager, "Enter an answer: ")
        answer = _read(manager)
        if answer == "":
            manager.write_library_to_storage()
            return

        manager.create_flashcard(question, answer)


def main(argv=None):
    """Run the study tool in the terminal."""
    arg_parser = argparse.ArgumentParser(prog="studycards", description="Study with flashcards.")
    arg_parser.add_argument("--library", default="library.txt", help="library file")
    arg_parser.add_argument("--dump", default="dump.txt", help="batch upload file")
    args = arg_parser.parse_args(argv)

    manager = FlashcardManager(args.library, args.dump)
    try:
        main_menu(manager)
    except (EOFError, KeyboardInterrupt):
        exit_program(manager)
    return 0