"""Benchmark runner to orchestrate the execution of benchmarks."""
import logging
from pathlib import Path
from typing import List, Optional

import requests

from ab_gnuplot.shared.config import Config
from .alternative_builder import AlternativeBuilder
from .alternative_runner import AlternativeRunner, discard_timing_file
from .apache_bench import ApacheBench
from .chart_renderer import ChartRenderer
from .console import Console
from .environment import Environment
from .exceptions import UnrecognizedOptionsError
from .models import Alternative, display_name
from .options import Options
from .request_session_manager import RequestSessionManager
from .response_checker import ResponseChecker
from .run_configuration import RunConfigResolver


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates the execution of benchmarks and manages output."""

    def __init__(self, config: Config, console: Console,
                 environment: Optional[Environment] = None,
                 session: Optional[requests.Session] = None):
        self.config = config
        self.console = console
        self.environment = environment or Environment(config)
        self.session = session
        self.chart_renderer = ChartRenderer(config)

    def run(self, options: Options) -> Path:
        """
        Run the complete benchmarking process.

        Args:
            options: The command line options; every one of them must be used.

        Returns:
            The path of the generated chart.
        """
        self.environment.require_command(self.config.ab_command, "ab")
        self.environment.require_command(self.config.gnuplot_command, "gnuplot")

        run_config = RunConfigResolver(options, self.console, self.config).resolve()
        alternatives = AlternativeBuilder(options, self.console, self.environment, self.config).build(run_config.kind)
        unrecognized = options.remaining_keys()
        if unrecognized:
            raise UnrecognizedOptionsError(unrecognized)

        session = self.session or RequestSessionManager.create_session_with_retries()
        alternative_runner = AlternativeRunner(
            self.config,
            self.environment,
            session,
            ResponseChecker(self.config.response_timeout),
            ApacheBench(self.config.ab_command, self.config.warmup_requests),
        )
        try:
            self.run_alternatives(alternative_runner, alternatives, run_config.cycles)
            output = self.chart_renderer.render(alternatives, run_config)
        finally:
            for alternative in alternatives:
                discard_timing_file(alternative)
            if self.session is None:
                session.close()

        logger.info("Benchmark completed successfully!")
        return output

    @staticmethod
    def run_alternatives(alternative_runner: AlternativeRunner, alternatives: List[Alternative], cycles: int) -> None:
        # strictly sequential, in the order they were built
        for index, alternative in enumerate(alternatives, 1):
            logger.info(f"[{index}/{len(alternatives)}] {display_name(alternative)}")
            alternative_runner.run(alternative, cycles)
