"""Turning "question: answer" lines and files into flashcards."""

import subprocess
from pathlib import Path

from studycards.flashcards import Flashcard

_PAIR_HINT = "Please provide a question/answer pair separated by ':'"


def is_letter(letter):
    """Return True for a single ASCII letter."""
    return len(letter) == 1 and ("A" <= letter <= "Z" or "a" <= letter <= "z")


def trim(text):
    """Strip spaces and tabs from both ends; all-blank text is returned unchanged."""
    stripped = text.strip(" \t")
    return stripped if stripped else text


def parse_line(line, next_id=0, separator=":"):
    """Split a line at the first separator into a card with the given ID.

    Raises ValueError when the line holds no separator.
    """
    question, found, answer = line.partition(separator)
    if not found:
        raise ValueError(_PAIR_HINT)
    return Flashcard(next_id, trim(question), trim(answer))


def _card_lines(file_name):
    with open(file_name, encoding="utf-8") as source:
        for raw in source:
            line = raw.rstrip("\n")
            if line:
                yield line


def parse_bulk_file(file_name, next_id=0, dump_path="dump.txt"):
    """Parse every non-empty line of a file into cards, then empty the dump file.

    Lines without a separator are reported and skipped.
    """
    cards = []
    for line in _card_lines(file_name):
        try:
            cards.append(parse_line(line, next_id))
        except ValueError as exc:
            print(exc)
    Path(dump_path).write_text("", encoding="utf-8")
    return cards


def parse_file(file_name, manager):
    """Parse every non-empty line of a file straight into the manager's library."""
    for line in _card_lines(file_name):
        try:
            manager.add_flashcard(parse_line(line, manager.next_id()))
        except ValueError as exc:
            print(exc)


def _open_in_default_app(path):
    subprocess.run(str(path), shell=True, check=False)


def bulk_upload(manager, opener=None):
    """Let the user fill the dump file, then load its cards and save the library.

    ``opener`` is called with the dump file's path and should return once the
    user is done with it; by default the file is handed to the system shell.
    Returns the cards that were added.
    """
    out = manager._stdout
    out.write("Waiting for file to close...\n")
    out.flush()
    (opener if opener is not None else _open_in_default_app)(manager.dump_path)

    cards = parse_bulk_file(manager.dump_path, manager.next_id(), manager.dump_path)
    for card in cards:
        out.write(f"Question: {card.question}\nAnswer: {card.answer}\n \n")
        manager.add_flashcard(card)

    manager.write_library_to_storage()
    out.write("File streaming complete. \n")
    out.flush()
    return cards