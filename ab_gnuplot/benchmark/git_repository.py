"""Operations on the git repository whose branches are benchmarked."""
import logging
from pathlib import Path
from typing import List, Optional

from .process import run_checked


logger = logging.getLogger(__name__)


class GitRepository:
    """A local git repository (with an optional composer project in it)."""

    def __init__(self, directory: Path, git_command: str = "git", composer_command: str = "composer"):
        self.directory = directory
        self.git_command = git_command
        self.composer_command = composer_command
        self._branches: Optional[List[str]] = None

    @staticmethod
    def validate_directory(value: str) -> Path:
        """
        Check that a path is the root directory of a git repository.

        Raises:
            ValueError: If the directory doesn't exist or is not a repository root.
        """
        directory = Path(value).expanduser()
        if not directory.is_dir():
            raise ValueError(f"The directory {value} does not exist.")
        if not (directory / ".git" / "config").is_file():
            raise ValueError(f"The directory {value} is not the root of a git repository.")
        return directory.resolve()

    def branches(self) -> List[str]:
        """The local branches, most recently committed first."""
        if self._branches is None:
            output = run_checked(
                [self.git_command, "for-each-ref", "--sort=-committerdate", "--format=%(refname:short)", "refs/heads/"],
                cwd=self.directory,
            )
            # a detached HEAD is not a branch
            names = (line.strip() for line in output.splitlines())
            self._branches = [name for name in names if name and not name.startswith("(")]
            logger.debug(f"Branches of {self.directory}: {', '.join(self._branches)}")
        return list(self._branches)

    def refresh_branches(self) -> None:
        self._branches = None

    def checkout(self, branch: str) -> None:
        logger.info(f"Checking out branch {branch}")
        run_checked([self.git_command, "checkout", "--quiet", branch], cwd=self.directory)

    def has_composer_json(self) -> bool:
        return (self.directory / "composer.json").is_file()

    def composer_install(self) -> None:
        logger.info("Installing composer dependencies")
        run_checked([self.composer_command, "install", "--no-interaction", "--no-progress"], cwd=self.directory)
