"""Text utilities: letter counts, bracket balance and a cursor-based line editor."""

import string
from collections import Counter
from collections.abc import Iterable

_MATCHING_OPEN = {")": "(", "]": "["}
_OPENERS = frozenset(_MATCHING_OPEN.values())
_TERMINATOR = "."


def letter_frequency(word):
    """Return how often each lowercase letter a..z occurs in ``word``."""
    counts = Counter(word)
    stray = sorted(set(counts) - set(string.ascii_lowercase))
    if stray:
        raise ValueError(f"only lowercase ASCII letters are allowed, got {stray!r}")
    return [counts[letter] for letter in string.ascii_lowercase]


def is_balanced(line):
    """Tell whether the round and square brackets in ``line`` pair up correctly."""
    stack = []
    for ch in line:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _MATCHING_OPEN:
            if not stack or stack.pop() != _MATCHING_OPEN[ch]:
                return False
    return not stack


def balance_report(lines: Iterable[str]):
    """Answer "yes" or "no" for each line until a line holding only "."."""
    report = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == _TERMINATOR:
            break
        report.append("yes" if is_balanced(line) else "no")
    return report


class LineEditor:
    """A line of text with a cursor that starts after the last character."""

    def __init__(self, text):
        self._before = list(text)
        self._after = []  # characters right of the cursor, nearest last

    def move_left(self):
        """Move the cursor one character left; do nothing at the start."""
        if self._before:
            self._after.append(self._before.pop())

    def move_right(self):
        """Move the cursor one character right; do nothing at the end."""
        if self._after:
            self._before.append(self._after.pop())

    def insert(self, char):
        """Insert a single character to the left of the cursor."""
        if len(char) != 1:
            raise ValueError(f"insert takes exactly one character, got {char!r}")
        self._before.append(char)

    def backspace(self):
        """Delete the character left of the cursor; do nothing at the start."""
        if self._before:
            self._before.pop()

    def __str__(self):
        return "".join(self._before) + "".join(reversed(self._after))


def apply_editor_commands(text, commands):
    """Run editor commands ("L", "D", "B", "P x") on ``text`` and return the result."""
    editor = LineEditor(text)
    for command in commands:
        op, *args = command.split()
        if op == "P":
            if len(args) != 1:
                raise ValueError(f"command P needs one character: {command!r}")
            editor.insert(args[0])
        elif args:
            raise ValueError(f"command {op!r} takes no argument: {command!r}")
        elif op == "L":
            editor.move_left()
        elif op == "D":
            editor.move_right()
        elif op == "B":
            editor.backspace()
        else:
            raise ValueError(f"unknown editor command: {command!r}")
    return str(editor)