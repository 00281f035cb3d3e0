"""Command line options of the --name=value form."""
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from ab_gnuplot.const import HELP_OPTIONS
from .exceptions import InvalidOptionValueError

T = TypeVar("T")

TRUE_VALUES = ("y", "yes", "1")
FALSE_VALUES = ("n", "no", "0")


def parse_bool(value: str) -> Optional[bool]:
    """
    Parse a yes/no value.

    Args:
        value: Raw value (case-insensitive).

    Returns:
        True or False, or None if the value is not recognized.
    """
    value = value.lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return None


def is_help_request(argv: Sequence[str]) -> bool:
    """Check if the user asked for the command syntax."""
    return any(arg in HELP_OPTIONS for arg in argv)


class Options:
    """The options received from the command line.

    Every stage removes the options it understands with pop() or
    pop_bool(): what's left at the end is unrecognized.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "Options":
        """
        Build the options from the raw command line tokens.

        Args:
            argv: Tokens like --name=value (the leading dashes are optional).

        Returns:
            The parsed options.
        """
        values = {}
        for arg in argv:
            if arg.startswith("--"):
                arg = arg[2:]
            name, _, value = arg.partition("=")
            values[name] = value
        return cls(values)

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(name, default)

    def pop(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.pop(name, default)

    def get_bool(self, name: str, default: Optional[bool] = None) -> Optional[bool]:
        """
        Get a boolean option.

        Raises:
            InvalidOptionValueError: If the value is not one of y/yes/1/n/no/0.
        """
        if name not in self._values:
            return default
        return self._to_bool(name, self._values[name])

    def pop_bool(self, name: str, default: Optional[bool] = None) -> Optional[bool]:
        """
        Get and remove a boolean option.

        Raises:
            InvalidOptionValueError: If the value is not one of y/yes/1/n/no/0.
        """
        if name not in self._values:
            return default
        return self._to_bool(name, self._values.pop(name))

    def pop_validated(self, name: str, validator: Callable[[str], T]) -> Optional[T]:
        """
        Get, remove and validate an option.

        Args:
            name: The option name.
            validator: Converts the raw value, raising ValueError if it's invalid.

        Returns:
            The converted value, or None if the option was not specified.

        Raises:
            InvalidOptionValueError: If the validator rejects the value.
        """
        if name not in self._values:
            return None
        value = self._values.pop(name)
        try:
            return validator(value)
        except ValueError as e:
            raise InvalidOptionValueError(name, value, str(e)) from e

    def remaining_keys(self) -> List[str]:
        return list(self._values)

    @staticmethod
    def _to_bool(name: str, value: str) -> bool:
        result = parse_bool(value)
        if result is None:
            raise InvalidOptionValueError(name, value, "expected y or n")
        return result
