"""Terminal helpers shared by the study tools."""

import os
import subprocess
import sys

_ANSI_CLEAR = "\033[H\033[2J"


def clear_screen():
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write(_ANSI_CLEAR)
        sys.stdout.flush()


def is_continue(answer):
    """Return True when a "Continue? (y/n)" answer means keep going."""
    return answer not in ("", "n", "N")