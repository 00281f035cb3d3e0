"""Constants for ab-gnuplot."""

APP_NAME = "ab-gnuplot"

# Exit codes
EXIT_SUCCESS = 0
EXIT_USER_ABORT = 0
EXIT_INTERNAL_ERROR = 1
EXIT_INVALID_OPTION = 2
EXIT_UNRECOGNIZED_OPTIONS = 3
EXIT_MISSING_COMMAND = 4
EXIT_GENERIC_FAILURE = 255

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "urllib3": "WARNING",
    "requests": "WARNING",
}

# External commands
DEFAULT_AB_COMMAND = "ab"
DEFAULT_GNUPLOT_COMMAND = "gnuplot"
DEFAULT_GIT_COMMAND = "git"
DEFAULT_COMPOSER_COMMAND = "composer"

# Run defaults
DEFAULT_CYCLES = 100
DEFAULT_OUTPUT = "ab-gnuplot.png"
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_HOSTS_FILE = "/etc/hosts"
DEFAULT_FONT_FILES = [
    "/usr/share/fonts/ttf-liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/liberation-sans/LiberationSans-Regular.ttf",
]

# HTTP
HTTP_SUCCESS = 200

HELP_OPTIONS = ("-h", "--help", "/?")

SYNTAX = """Syntax: ab-gnuplot [options]

Compare the response times of web pages, rendering the results with gnuplot.

General options:
  --cycles=<number>        number of measured requests
  --output=<path>          the PNG file to be generated
  --overwrite=<y|n>        overwrite the output file if it already exists
  --size=<width>x<height>  size of the generated image (default: 640x480)
  --kind=<branch|url>      what to compare:
                             branch: the same URL across git branches
                             url: different URLs

Options for --kind=branch:
  --dir=<path>             the root directory of the git repository
  --url=<url>              the URL to be benchmarked
  --composer=<y|n>         run "composer install" after each checkout
  --branch1=<name>         the first branch to benchmark
  --branch2=<name>         the second branch to benchmark
  ...

Options for --kind=url:
  --url1=<url>             the first URL to benchmark
  --url2=<url>             the second URL to benchmark
  ...

Every missing option is asked interactively.

Exit codes:
  0    success (or aborted by the user)
  1    unexpected internal error
  2    invalid option value
  3    unrecognized options
  4    a required command is missing
  255  other failures
"""
