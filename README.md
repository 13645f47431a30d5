# studycards

A small terminal program for keeping a library of flashcards and practising
them.

## Installing

```
pip install .
```

The tests need pytest, which the `test` extra installs:

```
pip install .[test]
pytest
```

## Running

```
studycards
```

Options:

- `--library PATH`: the library file (default `library.txt`).
- `--dump PATH`: the batch upload file (default `dump.txt`).

The paths are relative to the current directory. When the program starts it
loads the library. If either file is missing, it creates the dump file if
needed, writes an empty library file and starts with no cards. An existing
library file is emptied in that case too, so keep both files together.

Closing the input (Ctrl-D) or pressing Ctrl-C saves the library and ends the
program.

### Main menu

1. **View**: lists every card with its number, question and answer, then waits
   for Enter.
2. **Practice**: opens the practice menu.
3. **Create**: opens the create menu.
4. **Delete**: lists the cards. Enter the number of the card to remove and the
   library is saved. An empty line cancels. An unknown number prints
   `Invalid card number`. The cards after the removed one are renumbered.
5. **Exit**: saves the library and quits.

### Practice menu

If the library is empty, the program prints `No cards in library!` and goes
back to the main menu.

1. **Rotate**: goes through every card in order.
2. **Select**: enter card numbers one at a time, then press Enter on an empty
   line to start. The cards are practised in ascending order. A number entered
   twice is practised once.
3. **Shuffle**: goes through every card in random order. Each new round is
   shuffled again.
4. **Range**: enter a start and an end card number. The end must be greater
   than the start and no higher than the number of cards.
5. **Back to Main Menu**
6. **Exit**: saves the library and quits.

For each card the question is shown first. Press Enter to show the answer, then
press Enter again to go on. When a round is finished you are asked
`Continue? (y/n)`. Answer `n` or `N`, or press Enter on an empty line, to stop.
Any other answer starts another round. Input that is not a number, or a card
number that does not exist, prints `Invalid input.` and returns to the menu.

### Create menu

1. **Batch Upload**: hands the dump file's path to the system shell, which
   opens the file in its default application on systems that support that. The
   program waits until this returns. It then reads each non-empty
   `question: answer` line into the library, prints the new cards, empties the
   dump file and saves the library. Lines without a `:` are reported and
   skipped.
2. **Line Upload**: type `question: answer` lines one at a time. Each card is
   saved at once. Lines without a `:` are reported and skipped, and so are
   cards with an empty answer. An empty line finishes.
3. **Prompt Wizard**: asks for a question and then an answer. An empty question
   or answer saves the library and finishes.
4. **Back to Main Menu**
5. **Exit**: saves the library and quits.

Lines are split at the first `:`. Spaces and tabs around the question and the
answer are removed.

## Library file format

The library file holds three lines for each card:

```
ID: 0
Question: What is the capital of France?
Answer: Paris
```

When the file is loaded, the cards are numbered again from 0 in file order.

## Using it from Python

```python
from studycards.flashcards import FlashcardManager
from studycards.parser import parse_line

manager = FlashcardManager(library_path="library.txt", dump_path="dump.txt")
manager.read_from_storage()
manager.add_flashcard(parse_line("2 + 2: 4", manager.next_id()))
manager.write_library_to_storage()
print(manager.format_card(0))
```

`studycards.flashcards`

- `Flashcard`: a dataclass with `id`, `question` and `answer`.
- `FlashcardManager(library_path, dump_path, stdin, stdout, clear)`: holds the
  cards. It supports `len()`, iteration and indexing. `stdin`, `stdout` and the
  screen-clearing callable `clear` default to the terminal.
  - `add_flashcard(card)`, `create_flashcard(question, answer)`,
    `remove_flashcard(card_number)` and `update_ids()` (sorts by ID).
  - `format_card(card_number)`, `display_card(card_number)` and
    `display_all_cards()`. Card numbers are zero-based. Unknown numbers raise
    `IndexError`.
  - `read_from_storage()`, `write_library_to_storage()` and
    `append_card_to_storage(card)`.
  - `practice_card(card)` takes a `Flashcard` or a position.
    `rotate_through_cards()`, `selected_practice()`,
    `practice_selected_cards(selected_cards)`, `shuffle_cards(rng)` and
    `range_select()` are the interactive sessions.
  - `has_cards()`, `card_count()` and `next_id()`.

`studycards.parser`

- `parse_line(line, next_id=0, separator=":")` returns a `Flashcard`. It raises
  `ValueError` when the separator is missing.
- `parse_bulk_file(file_name, next_id=0, dump_path="dump.txt")` returns the
  cards of a file and empties the dump file.
- `parse_file(file_name, manager)` adds a file's cards to a manager.
- `bulk_upload(manager, opener=None)` runs the batch upload. `opener` is called
  with the dump file's path in place of the shell.
- `trim(text)` and `is_letter(letter)` are small helpers.

`studycards.menus`

- `Menu(name, options)` with `render()` and `display(stdout)`.
- `main_menu`, `practice_menu`, `create_menu`, `start_line_upload`,
  `prompt_wizard` and `exit_program` take a `FlashcardManager`.
- `main(argv=None)` is the `studycards` command.

`studycards.utility`

- `clear_screen()` clears the terminal.
- `is_continue(answer)` tells whether a `Continue? (y/n)` answer means go on.

## What it does not do

- Batch upload does not start an editor itself. It only passes the dump file's
  path to the shell. Where the shell cannot open the file, fill the dump file
  in an editor before you choose **Batch Upload**.
- There is no command-line option to import a file without the menus. Use
  `parse_file` from Python for that.
- Cards have no scores or scheduling. Practice only shows questions and
  answers.