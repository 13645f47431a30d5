"""Flashcards, their on-disk library and the ways to practise them."""

import random
import sys
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path

from studycards.utility import clear_screen, is_continue

_CONTINUE_PROMPT = "\nContinue? (y/n): "
_SELECT_PROMPT = (
    "Enter the card numbers you'd like to press, one at a time "
    "(press Enter to finish): "
)


@dataclass
class Flashcard:
    """A question and its answer, with the card's position in the library."""

    id: int = 0
    question: str = ""
    answer: str = ""


class FlashcardManager:
    """Holds the flashcard library, stores it on disk and runs practice sessions."""

    def __init__(
        self,
        library_path="library.txt",
        dump_path="dump.txt",
        stdin=None,
        stdout=None,
        clear=None,
    ):
        self.library_path = Path(library_path)
        self.dump_path = Path(dump_path)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_screen
        self._cards = []
        self._next_id = 0

    def __len__(self):
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __getitem__(self, index):
        return self._cards[index]

    # -- terminal I/O ------------------------------------------------------

    def _write(self, text=""):
        print(text, file=self._stdout)

    def _prompt(self, text):
        self._stdout.write(text)
        self._stdout.flush()
        return self._read_line()

    def _read_line(self):
        return self._stdin.readline().rstrip("\r\n")

    def _card_at(self, card_number):
        if not 0 <= card_number < len(self._cards):
            raise IndexError(f"Invalid card number: {card_number}")
        return self._cards[card_number]

    def _keep_going(self):
        return is_continue(self._prompt(_CONTINUE_PROMPT))

    # -- library -----------------------------------------------------------

    def add_flashcard(self, card):
        """Add an existing card to the library."""
        self._cards.append(card)
        self._next_id += 1

    def create_flashcard(self, question, answer):
        """Create a card with the next free ID, add it and return it."""
        card = Flashcard(self._next_id, question, answer)
        self.add_flashcard(card)
        return card

    def update_ids(self):
        """Order the library by card ID."""
        self._cards.sort(key=attrgetter("id"))

    def format_card(self, card_number):
        """Return the display text of the card at a zero-based position."""
        card = self._card_at(card_number)
        return (
            f"Card ID: {card.id + 1}.\n"
            f"Question: {card.question}\n"
            f"Answer: {card.answer}\n"
        )

    def display_card(self, card_number):
        self._stdout.write(self.format_card(card_number))

    def display_all_cards(self):
        for number in range(len(self._cards)):
            self.display_card(number)
            self._write()

    def remove_flashcard(self, card_number):
        """Remove the card at a zero-based position and renumber the rest."""
        self._card_at(card_number)
        del self._cards[card_number]
        for position, card in enumerate(self._cards[card_number:], start=card_number):
            card.id = position
        self._next_id -= 1

    @staticmethod
    def _record(card):
        return f"ID: {card.id}\nQuestion: {card.question}\nAnswer: {card.answer}\n"

    def append_card_to_storage(self, card):
        with self.library_path.open("a", encoding="utf-8") as library:
            library.write(self._record(card))

    def write_library_to_storage(self):
        with self.library_path.open("w", encoding="utf-8") as library:
            library.writelines(self._record(card) for card in self._cards)

    def read_from_storage(self):
        """Load the library file; on first run create empty library and dump files."""
        if not self.library_path.exists() or not self.dump_path.exists():
            if not self.dump_path.exists():
                self.dump_path.touch()
            self.library_path.write_text("", encoding="utf-8")
            return

        with self.library_path.open(encoding="utf-8") as library:
            lines = [line.rstrip("\n") for line in library]

        records = iter(lines)
        for id_line, question_line, answer_line in zip(records, records, records):
            int(id_line[4:])
            self.create_flashcard(question_line[10:], answer_line[8:])

    # -- practice ----------------------------------------------------------

    def practice_card(self, card):
        """Show a card's question, wait for Enter, show its answer, wait again.

        ``card`` is either a Flashcard or a zero-based position in the library.
        """
        if not isinstance(card, Flashcard):
            card = self._card_at(card)
        self._clear()
        self._write(card.question)
        self._read_line()
        self._write(f"  {card.answer}")
        self._read_line()

    def _practice_all(self):
        for card in list(self._cards):
            self.practice_card(card)

    def rotate_through_cards(self):
        self._clear()
        self._practice_all()
        while self._keep_going():
            self._practice_all()

    def selected_practice(self):
        self._clear()
        self.display_all_cards()
        selected = []
        while entry := self._prompt(_SELECT_PROMPT):
            selected.append(int(entry) - 1)
        selected.sort()

        self.practice_selected_cards(selected)
        while self._keep_going():
            self.practice_selected_cards(selected)

    def practice_selected_cards(self, selected_cards):
        """Practise the given positions in order, skipping repeats; return them."""
        self._clear()
        practised = []
        previous = None
        for number in selected_cards:
            if number == previous:
                continue
            self.practice_card(number)
            practised.append(number)
            previous = number
        return practised

    def shuffle_cards(self, rng=None):
        rng = rng if rng is not None else random.Random()
        self._clear()
        order = list(range(len(self._cards)))
        rng.shuffle(order)
        for number in order:
            self.practice_card(number)

        while True:
            self._clear()
            if not self._keep_going():
                break
            rng.shuffle(order)
            for number in order:
                self.practice_card(number)

    def range_select(self):
        self._clear()
        self.display_all_cards()
        try:
            start = int(self._prompt("Start: ")) - 1
            end = int(self._prompt("End: ")) - 1
        except ValueError:
            self._write("Invalid input")
            return
        if start < 0 or end >= len(self._cards) or end <= start:
            self._write("Invalid input")
            return

        for number in range(start, end + 1):
            self.practice_card(number)

        while True:
            self._clear()
            if not self._keep_going():
                break
            for number in range(start, end + 1):
                self.practice_card(number)

    # -- queries -----------------------------------------------------------

    def has_cards(self):
        return bool(self._cards)

    def card_count(self):
        return len(self._cards)

    def next_id(self):
        return self._next_id