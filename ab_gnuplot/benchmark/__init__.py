"""Benchmark package initialization."""
from .models import (
    Alternative, BranchAlternative, ComparisonKind, ImageSize, RunConfig, RunState, Site, UrlAlternative,
    display_name,
)
from .constants import BenchmarkConstants
from .exceptions import (
    AbGnuplotError, UserAbortError, InvalidOptionValueError, UnrecognizedOptionsError,
    MissingCommandError, GenericFailureError, ProcessFailedError, ResponseCheckError,
)
from .options import Options
from .console import Console
from .environment import Environment
from .git_repository import GitRepository
from .run_configuration import RunConfigResolver
from .alternative_builder import AlternativeBuilder
from .request_session_manager import RequestSessionManager
from .response_checker import ResponseChecker
from .apache_bench import ApacheBench
from .alternative_runner import AlternativeRunner
from .chart_renderer import ChartRenderer
from .runner import BenchmarkRunner

__all__ = [
    'Alternative',
    'BranchAlternative',
    'ComparisonKind',
    'ImageSize',
    'RunConfig',
    'RunState',
    'Site',
    'UrlAlternative',
    'display_name',
    'BenchmarkConstants',
    'AbGnuplotError',
    'UserAbortError',
    'InvalidOptionValueError',
    'UnrecognizedOptionsError',
    'MissingCommandError',
    'GenericFailureError',
    'ProcessFailedError',
    'ResponseCheckError',
    'Options',
    'Console',
    'Environment',
    'GitRepository',
    'RunConfigResolver',
    'AlternativeBuilder',
    'RequestSessionManager',
    'ResponseChecker',
    'ApacheBench',
    'AlternativeRunner',
    'ChartRenderer',
    'BenchmarkRunner'
]
