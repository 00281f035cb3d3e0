"""Resolution of the settings shared by every alternative."""
import logging
import re
from pathlib import Path

from ab_gnuplot.const import DEFAULT_WIDTH, DEFAULT_HEIGHT
from ab_gnuplot.shared.config import Config
from .console import Console
from .exceptions import GenericFailureError, UserAbortError
from .models import ComparisonKind, ImageSize, RunConfig
from .options import Options


logger = logging.getLogger(__name__)

SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*$", re.IGNORECASE)

KIND_CHOICES = [
    (ComparisonKind.BRANCH, "the same URL across different git branches"),
    (ComparisonKind.URL, "different URLs"),
]


def parse_cycles(value: str) -> int:
    try:
        cycles = int(value.strip())
    except ValueError:
        raise ValueError("The number of cycles must be an integer.")
    if cycles < 1:
        raise ValueError("The number of cycles must be greater than zero.")
    return cycles


def parse_size(value: str) -> ImageSize:
    """Parse an image size like 800x600."""
    match = SIZE_PATTERN.match(value)
    if not match:
        raise ValueError("The size must be in the form <width>x<height>.")
    size = ImageSize(width=int(match.group(1)), height=int(match.group(2)))
    if size.width < 1 or size.height < 1:
        raise ValueError("The width and the height must be greater than zero.")
    return size


def parse_kind(value: str) -> ComparisonKind:
    try:
        return ComparisonKind(value.strip().lower())
    except ValueError:
        raise ValueError(f"Allowed values are: {', '.join(kind.value for kind in ComparisonKind)}.")


def parse_output(value: str) -> Path:
    if not value.strip():
        raise ValueError("The output file name is empty.")
    path = Path(value.strip()).expanduser().resolve()
    if path.is_dir():
        raise ValueError(f"{path} is a directory.")
    if not path.parent.is_dir():
        raise ValueError(f"The directory {path.parent} does not exist.")
    return path


class RunConfigResolver:
    """Reads the run settings from the options, asking for the missing ones."""

    def __init__(self, options: Options, console: Console, config: Config):
        self.options = options
        self.console = console
        self.config = config

    def resolve(self) -> RunConfig:
        cycles = self.options.pop_validated("cycles", parse_cycles)
        if cycles is None:
            cycles = self.console.ask("Number of requests to measure", default=str(self.config.default_cycles),
                                      validator=parse_cycles)
        output = self.resolve_output()
        size = self.options.pop_validated("size", parse_size) or ImageSize(DEFAULT_WIDTH, DEFAULT_HEIGHT)
        kind = self.resolve_kind()
        run_config = RunConfig(cycles=cycles, output=output, size=size, kind=kind)
        logger.debug(f"Run configuration: {run_config}")
        return run_config

    def resolve_output(self) -> Path:
        """
        Determine the image to be generated.

        Raises:
            GenericFailureError: If the file exists and --overwrite=n was specified.
            UserAbortError: If the file exists and the user doesn't want to overwrite it.
        """
        output = self.options.pop_validated("output", parse_output)
        if output is None:
            output = self.console.ask("Output image", default=str(self.config.default_output), validator=parse_output)
        overwrite = self.options.pop_bool("overwrite")
        if output.exists():
            if overwrite is None:
                overwrite = self.console.confirm(f"The file {output} already exists. Overwrite it?", default=False)
                if not overwrite:
                    raise UserAbortError()
            elif not overwrite:
                raise GenericFailureError(f"The output file {output} already exists.")
        return output

    def resolve_kind(self) -> ComparisonKind:
        kind = self.options.pop_validated("kind", parse_kind)
        if kind is None:
            index = self.console.choose("What do you want to compare?", [label for _, label in KIND_CHOICES])
            kind = KIND_CHOICES[index][0]
        return kind
