import json
from pathlib import Path
from typing import Dict, Any, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from ab_gnuplot.const import (
    DEFAULT_AB_COMMAND, DEFAULT_GNUPLOT_COMMAND, DEFAULT_GIT_COMMAND, DEFAULT_COMPOSER_COMMAND,
    DEFAULT_CYCLES, DEFAULT_OUTPUT, DEFAULT_HOSTS_FILE, DEFAULT_FONT_FILES,
    DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT, LIBRARY_LOG_LEVELS,
)

CONFIG_FILE = Path("ab-gnuplot.json")


class Config(BaseSettings):
    """Global configuration settings for ab-gnuplot.

    Command-line options always take precedence over these values: they
    only provide defaults and the locations of the external tools.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = LOG_FORMAT
    log_date_format: str = LOG_DATE_FORMAT
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    ab_command: str = DEFAULT_AB_COMMAND
    gnuplot_command: str = DEFAULT_GNUPLOT_COMMAND
    git_command: str = DEFAULT_GIT_COMMAND
    composer_command: str = DEFAULT_COMPOSER_COMMAND

    default_cycles: int = DEFAULT_CYCLES
    default_output: Path = Path(DEFAULT_OUTPUT)
    hosts_file: Path = Path(DEFAULT_HOSTS_FILE)
    font_files: List[Path] = [Path(p) for p in DEFAULT_FONT_FILES]
    response_timeout: float = 10
    warmup_requests: int = 5

    model_config = SettingsConfigDict(
        env_prefix='AB_GNUPLOT_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from the ab-gnuplot.json file, if any."""
        if CONFIG_FILE.exists():
            with open(CONFIG_FILE, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
