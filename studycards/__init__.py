"""Create, store and practise question/answer flashcards from the terminal."""

__version__ = "0.1.0"