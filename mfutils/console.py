"""Helpers for asking questions on a console."""

from __future__ import annotations

import os
import re
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Pattern, TextIO, Union

_MAX_ATTEMPTS = 65535


@dataclass
class UserChoiceParams:
    """What to ask in :meth:`ConsoleToolbox.get_user_choice` and what to accept."""

    question: str = ""
    possible_answers: list[tuple[Union[str, Pattern[str]], str]] = field(default_factory=list)
    incorrect_input_message: str = "Incorrect input."
    max_attempts: int = _MAX_ATTEMPTS


class ConsoleToolbox:
    """Writes prompts to ``output`` and reads the user's replies from ``input_stream``."""

    def __init__(self, output: TextIO, input_stream: Optional[TextIO] = None) -> None:
        self._output = output
        self._input = input_stream if input_stream is not None else sys.stdin
        self._pending: deque[str] = deque()

    @classmethod
    def for_stdout(cls) -> "ConsoleToolbox":
        """A toolbox printing to the current standard output."""
        return cls(sys.stdout, sys.stdin)

    @classmethod
    def for_stderr(cls) -> "ConsoleToolbox":
        """A toolbox printing to the current standard error."""
        return cls(sys.stderr, sys.stdin)

    def _print_line(self, text: str) -> None:
        if text:
            self._output.write(text if text.endswith("\n") else text + "\n")
            self._output.flush()

    def _next_word(self) -> str:
        while not self._pending:
            line = self._input.readline()
            if not line:
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _is_terminal(self) -> bool:
        try:
            return self._input.isatty()
        except (AttributeError, ValueError):
            return False

    def get_next(self) -> str:
        """Wait for one character of input and return it without echoing it."""
        if self._is_terminal():
            return self._read_terminal_char()
        char = self._input.read(1)
        if not char:
            raise EOFError("no more input")
        return char

    def _read_terminal_char(self) -> str:
        if os.name == "nt":
            import msvcrt

            return msvcrt.getwch()

        import termios

        fd = self._input.fileno()
        saved = termios.tcgetattr(fd)
        quiet = termios.tcgetattr(fd)
        quiet[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSANOW, quiet)
        try:
            data = os.read(fd, 1)
        finally:
            termios.tcsetattr(fd, termios.TCSANOW, saved)
        if len(data) != 1:
            raise EOFError("no more input")
        return data.decode(errors="replace")

    def get_user_answer(self, question: str) -> str:
        """Show ``question`` (with a trailing newline) and return the next non-blank word."""
        self._print_line(question)
        return self._next_word()

    def get_user_choice(self, params: UserChoiceParams) -> Optional[str]:
        """Ask until a word matches one of the patterns at its start.

        Returns the answer paired with the first matching pattern, or None
        once ``params.max_attempts`` wrong words have been given.
        """
        self._print_line(params.question)
        for _ in range(params.max_attempts):
            word = self._next_word()
            for pattern, answer in params.possible_answers:
                if re.match(pattern, word):
                    return answer
            self._print_line(params.incorrect_input_message)
        return None

    def press_enter_to_continue(self) -> None:
        """Consume input up to and including the end of the line."""
        while self.get_next() not in ("\n", "\r"):
            pass