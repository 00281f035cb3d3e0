"""Builds the list of alternatives to be benchmarked."""
import logging
from pathlib import Path
from typing import List
from urllib.parse import urlsplit, urlunsplit

from ab_gnuplot.shared.config import Config
from .console import Console
from .environment import Environment
from .exceptions import GenericFailureError, InvalidOptionValueError
from .git_repository import GitRepository
from .models import Alternative, BranchAlternative, ComparisonKind, Site, UrlAlternative
from .options import Options


logger = logging.getLogger(__name__)

URL_SCHEMES = ("http", "https")


def normalize_url(value: str) -> str:
    """
    Validate an absolute http(s) URL.

    A URL without path (like http://example.com) gets a trailing slash,
    since ab refuses it otherwise.

    Raises:
        ValueError: If the URL is not valid.
    """
    value = value.strip()
    try:
        parts = urlsplit(value)
        valid = parts.scheme.lower() in URL_SCHEMES and bool(parts.hostname) and parts.port != 0
    except ValueError:
        valid = False
    if not valid:
        raise ValueError(f"{value!r} is not a valid http or https URL.")
    if not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


class AlternativeBuilder:
    """Creates the alternatives from the options, asking for the missing ones."""

    def __init__(self, options: Options, console: Console, environment: Environment, config: Config):
        self.options = options
        self.console = console
        self.environment = environment
        self.config = config

    def build(self, kind: ComparisonKind) -> List[Alternative]:
        if kind is ComparisonKind.BRANCH:
            alternatives = self.build_branch_alternatives()
        else:
            alternatives = self.build_url_alternatives()
        if not alternatives:
            raise GenericFailureError("Nothing to benchmark.")
        return alternatives

    def build_branch_alternatives(self) -> List[BranchAlternative]:
        self.environment.require_command(self.config.git_command, "git")
        directory = self.options.pop_validated("dir", GitRepository.validate_directory)
        if directory is None:
            directory = self.console.ask("Directory of the git repository", default=str(Path.cwd()),
                                         validator=GitRepository.validate_directory)
        repository = GitRepository(directory, self.config.git_command, self.config.composer_command)
        site = self.resolve_site("url", "URL to be benchmarked")
        branches = self.resolve_branches(repository)
        composer_install = self.resolve_composer_install(repository)
        return [BranchAlternative(directory, branch, composer_install, site) for branch in branches]

    def resolve_branches(self, repository: GitRepository) -> List[str]:
        """
        Read the branches from the --branch1, --branch2, ... options.

        If no branch option is specified, the user picks them from a menu.

        Raises:
            InvalidOptionValueError: If a branch does not exist.
        """
        available = repository.branches()
        if not available:
            raise GenericFailureError(f"The repository {repository.directory} does not have any branch.")
        selected = []
        index = 1
        while self.options.has(f"branch{index}"):
            branch = self.options.pop(f"branch{index}")
            if branch not in available:
                raise InvalidOptionValueError(f"branch{index}", branch, f"the branch {branch} does not exist")
            selected.append(branch)
            index += 1
        if selected:
            return selected
        while True:
            remaining = [branch for branch in available if branch not in selected]
            if not remaining:
                break
            choice = self.console.choose(f"Select the branch #{len(selected) + 1}", remaining, required=not selected)
            if choice is None:
                break
            selected.append(remaining[choice])
        return selected

    def resolve_composer_install(self, repository: GitRepository) -> bool:
        composer_install = self.options.pop_bool("composer")
        if composer_install is None:
            composer_install = repository.has_composer_json() and self.console.confirm(
                "Run composer install after each checkout?", default=True)
        if composer_install:
            self.environment.require_command(self.config.composer_command, "composer")
        return composer_install

    def build_url_alternatives(self) -> List[UrlAlternative]:
        sites = []
        index = 1
        while self.options.has(f"url{index}"):
            sites.append(self.resolve_site(f"url{index}", f"URL #{index}"))
            index += 1
        if not sites:
            sites = self.ask_sites()
        return [UrlAlternative(site) for site in sites]

    def ask_sites(self) -> List[Site]:
        """Ask for the URLs one at a time: the first one is mandatory."""
        sites = [self.environment.resolve_site(self.console.ask("URL #1", validator=normalize_url))]
        while True:
            url = self.console.ask_optional(f"URL #{len(sites) + 1} (leave empty to stop)", validator=normalize_url)
            if url is None:
                return sites
            sites.append(self.environment.resolve_site(url))

    def resolve_site(self, name: str, question: str) -> Site:
        url = self.options.pop_validated(name, normalize_url)
        if url is None:
            url = self.console.ask(question, validator=normalize_url)
        return self.environment.resolve_site(url)
