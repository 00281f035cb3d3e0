"""Benchmarks a single alternative."""
import logging

import requests

from ab_gnuplot.shared.config import Config
from .apache_bench import ApacheBench
from .environment import Environment
from .git_repository import GitRepository
from .models import Alternative, ComparisonKind, RunState, display_name
from .response_checker import ResponseChecker


logger = logging.getLogger(__name__)


def prepare_alternative(alternative: Alternative, config: Config) -> None:
    """Check out the branch (and install its dependencies) or just announce the URL."""
    if alternative.kind is ComparisonKind.BRANCH:
        repository = GitRepository(alternative.directory, config.git_command, config.composer_command)
        repository.checkout(alternative.branch)
        if alternative.composer_install:
            repository.composer_install()
    else:
        logger.info(f"Benchmarking {alternative.site.url}")


def discard_timing_file(alternative: Alternative) -> None:
    if alternative.timing_file is not None:
        alternative.timing_file.unlink(missing_ok=True)
        alternative.timing_file = None


class AlternativeRunner:
    """Runs the steps of the benchmark of an alternative.

    preparing -> response check -> warm-up -> response check -> measuring -> done

    Any failure leaves the alternative in the failed state and is
    propagated. The hosts file patch (if any) is active during every step.
    """

    def __init__(self, config: Config, environment: Environment, session: requests.Session,
                 response_checker: ResponseChecker, apache_bench: ApacheBench):
        self.config = config
        self.environment = environment
        self.session = session
        self.response_checker = response_checker
        self.apache_bench = apache_bench

    def run(self, alternative: Alternative, cycles: int) -> None:
        discard_timing_file(alternative)
        alternative.state = RunState.PREPARING
        try:
            with self.environment.patch_hosts_file(alternative.site):
                prepare_alternative(alternative, self.config)
                alternative.state = RunState.RESPONSE_CHECK_PRE
                self.response_checker.check(self.session, alternative.site)
                alternative.state = RunState.WARM_UP
                self.apache_bench.warm_up(alternative.site)
                alternative.state = RunState.RESPONSE_CHECK_POST
                self.response_checker.check(self.session, alternative.site)
                alternative.state = RunState.MEASURING
                alternative.timing_file = self.apache_bench.measure(alternative.site, cycles)
        except BaseException:
            logger.debug(f"Benchmark of {display_name(alternative)} failed while {alternative.state.value}")
            alternative.state = RunState.FAILED
            discard_timing_file(alternative)
            raise
        alternative.state = RunState.DONE
