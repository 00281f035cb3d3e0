"""Interactive questions asked on the terminal."""
import sys
from typing import Callable, List, Optional, TextIO, TypeVar

try:
    import termios
    import tty
except ImportError:  # not available on Windows
    termios = None
    tty = None

from .exceptions import UserAbortError
from .options import parse_bool

T = TypeVar("T")

ABORT_KEYS = ("\x1b", "\x03", "\x04", "")
ENTER_KEYS = ("\r", "\n")


class Console:
    """Asks the user for the values that were not specified on the command line.

    Ctrl+C, end of input and (in menus) the Escape key abort the whole
    process by raising UserAbortError.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        key_reader: Optional[Callable[[], str]] = None,
    ):
        self._input = input_func
        self._output = output
        self._key_reader = key_reader

    @classmethod
    def create(cls) -> "Console":
        """Create a console reading from the current terminal."""
        key_reader = _read_terminal_key if termios is not None and sys.stdin.isatty() else None
        return cls(key_reader=key_reader)

    @property
    def single_key(self) -> bool:
        """Whether a selection can be made with a single keystroke."""
        return self._key_reader is not None

    def write(self, text: str = "") -> None:
        output = self._output or sys.stdout
        output.write(text + "\n")
        output.flush()

    def read_line(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt):
            self.write()
            raise UserAbortError()

    def ask(self, question: str, default: Optional[str] = None,
            validator: Optional[Callable[[str], T]] = None):
        """
        Ask for a mandatory value until a valid one is entered.

        Args:
            question: The text of the question.
            default: The value used when the user just hits Enter.
            validator: Converts the answer, raising ValueError if it's invalid.

        Returns:
            The answer, converted by the validator if specified.
        """
        prompt = f"{question} [{default}]: " if default is not None else f"{question}: "
        while True:
            answer = self.read_line(prompt).strip()
            if not answer:
                if default is None:
                    self.write("Please specify a value.")
                    continue
                answer = default
            if validator is None:
                return answer
            try:
                return validator(answer)
            except ValueError as e:
                self.write(str(e))

    def ask_optional(self, question: str, validator: Optional[Callable[[str], T]] = None):
        """Like ask(), but an empty answer returns None."""
        while True:
            answer = self.read_line(f"{question}: ").strip()
            if not answer:
                return None
            if validator is None:
                return answer
            try:
                return validator(answer)
            except ValueError as e:
                self.write(str(e))

    def confirm(self, question: str, default: Optional[bool] = None) -> bool:
        """Ask a yes/no question."""
        hint = {True: "Y/n", False: "y/N", None: "y/n"}[default]
        while True:
            answer = self.read_line(f"{question} [{hint}]: ").strip()
            if not answer and default is not None:
                return default
            result = parse_bool(answer)
            if result is not None:
                return result
            self.write("Please answer y or n.")

    def read_selection(self, count: int) -> str:
        """
        Read the user choice among count numbered items.

        Uses a single keystroke when the terminal supports it and every
        item is selectable with one digit, a whole line otherwise.

        Returns:
            The raw selection; an empty string means no selection.
        """
        if not self.single_key or count > 9:
            return self.read_line("> ").strip()
        output = self._output or sys.stdout
        output.write("> ")
        output.flush()
        try:
            key = self._key_reader()
        except KeyboardInterrupt:
            key = "\x03"
        if key in ABORT_KEYS:
            self.write()
            raise UserAbortError()
        if key in ENTER_KEYS:
            self.write()
            return ""
        self.write(key)
        return key.strip()

    def choose(self, question: str, choices: List[str], required: bool = True) -> Optional[int]:
        """
        Let the user pick one item of a numbered menu.

        Args:
            question: The text shown above the menu.
            choices: The menu items.
            required: If False, an empty selection is accepted.

        Returns:
            The 0-based index of the chosen item, None for an empty selection.
        """
        self.write(question)
        for index, choice in enumerate(choices, 1):
            self.write(f"  {index}: {choice}")
        if not required:
            self.write("  (press Enter to stop)")
        while True:
            selection = self.read_selection(len(choices))
            if not selection:
                if not required:
                    return None
                self.write("Please select an item.")
                continue
            if selection.isdigit() and 1 <= int(selection) <= len(choices):
                return int(selection) - 1
            self.write(f"Please enter a number between 1 and {len(choices)}.")


def _read_terminal_key() -> str:
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
