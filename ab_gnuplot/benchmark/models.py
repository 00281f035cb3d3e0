"""Data models for the benchmarking system."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlsplit


class ComparisonKind(str, Enum):
    """What the alternatives differ in."""
    BRANCH = "branch"
    URL = "url"


class RunState(str, Enum):
    """The steps of the benchmark of an alternative."""
    PREPARING = "preparing"
    RESPONSE_CHECK_PRE = "checking the response"
    WARM_UP = "warming up"
    RESPONSE_CHECK_POST = "checking the response after the warm-up"
    MEASURING = "measuring"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class Site:
    """A benchmarked URL.

    ip is set only when the host name must be mapped to another address
    (for example the docker host when running inside a container).
    """
    url: str
    ip: Optional[str] = None
    request_url: Optional[str] = None

    @property
    def hostname(self) -> str:
        return urlsplit(self.url).hostname or ""

    @property
    def target_url(self) -> str:
        """The URL requests are actually sent to."""
        return self.request_url or self.url


@dataclass
class BranchAlternative:
    """A git branch of a repository served at a shared URL."""
    directory: Path
    branch: str
    composer_install: bool
    site: Site
    timing_file: Optional[Path] = field(default=None, compare=False)
    state: Optional[RunState] = field(default=None, compare=False)
    kind: ComparisonKind = field(default=ComparisonKind.BRANCH, init=False)


@dataclass
class UrlAlternative:
    """A standalone URL."""
    site: Site
    timing_file: Optional[Path] = field(default=None, compare=False)
    state: Optional[RunState] = field(default=None, compare=False)
    kind: ComparisonKind = field(default=ComparisonKind.URL, init=False)


Alternative = Union[BranchAlternative, UrlAlternative]


def display_name(alternative: Alternative) -> str:
    """The label of an alternative in the chart legend."""
    if alternative.kind is ComparisonKind.BRANCH:
        return alternative.branch
    return alternative.site.url


@dataclass(frozen=True)
class ImageSize:
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class RunConfig:
    """Resolved settings of a benchmarking run."""
    cycles: int
    output: Path
    size: ImageSize
    kind: ComparisonKind
