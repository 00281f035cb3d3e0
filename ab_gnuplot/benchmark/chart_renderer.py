"""Generates the chart from the benchmark results."""
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from ab_gnuplot.shared.config import Config
from .constants import BenchmarkConstants
from .exceptions import GenericFailureError
from .models import Alternative, RunConfig, display_name
from .process import run_checked


# Configure logging
logger = logging.getLogger(__name__)


def quote(value: str) -> str:
    """Quote a string for a gnuplot script."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class ChartRenderer:
    """Renders the response times of the alternatives with gnuplot."""

    def __init__(self, config: Config):
        self.config = config

    def font_file(self) -> Optional[Path]:
        for font_file in self.config.font_files:
            if font_file.is_file():
                return font_file
        return None

    def build_script(self, alternatives: List[Alternative], run_config: RunConfig) -> str:
        """
        Build the gnuplot script drawing one smoothed line per alternative.

        Args:
            alternatives: The benchmarked alternatives (with their timing files).
            run_config: The settings of the run.

        Returns:
            The gnuplot script.
        """
        terminal = f"set terminal png noenhanced size {run_config.size.width},{run_config.size.height}"
        font_file = self.font_file()
        if font_file is not None:
            terminal += f" font {quote(str(font_file))}"
        else:
            logger.debug("No font file found, using the gnuplot default font")
        plots = []
        for alternative in alternatives:
            if alternative.timing_file is None:
                raise GenericFailureError(f"{display_name(alternative)} has not been benchmarked.")
            plots.append(
                f"{quote(str(alternative.timing_file))} using {BenchmarkConstants.TIMING_COLUMN}"
                f" smooth sbezier with lines title {quote(display_name(alternative))}"
            )
        lines = [
            terminal,
            f"set output {quote(str(run_config.output))}",
            f"set title {quote(BenchmarkConstants.CHART_TITLE)}",
            "set key left top",
            "set grid y",
            f"set xlabel {quote(BenchmarkConstants.CHART_X_LABEL)}",
            f"set ylabel {quote(BenchmarkConstants.CHART_Y_LABEL)}",
            "plot " + ", \\\n     ".join(plots),
        ]
        return "\n".join(lines) + "\n"

    def render(self, alternatives: List[Alternative], run_config: RunConfig) -> Path:
        """
        Run gnuplot to generate the chart image.

        Raises:
            ProcessFailedError: If gnuplot fails.
        """
        script = self.build_script(alternatives, run_config)
        fd, name = tempfile.mkstemp(prefix=BenchmarkConstants.TIMING_FILE_PREFIX,
                                    suffix=BenchmarkConstants.SCRIPT_FILE_SUFFIX)
        script_file = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(script)
            logger.info("Generating the chart")
            run_checked([self.config.gnuplot_command, str(script_file)])
        finally:
            script_file.unlink(missing_ok=True)
        logger.info(f"Chart saved: {run_config.output}")
        return run_config.output
