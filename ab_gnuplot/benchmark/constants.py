"""Constants for the benchmarking system."""
from typing import Dict, Tuple


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    CONCURRENCY = 1
    DEFAULT_WARMUP_REQUESTS = 5
    DEFAULT_TIMEOUT = 10  # seconds
    DEFAULT_MAX_RETRIES = 0
    TIMING_COLUMN = 10  # ab -g: the weekday/month/day/time/year of starttime take columns 1-5
    TIMING_FILE_PREFIX = "ab-gnuplot-"
    TIMING_FILE_SUFFIX = ".tsv"
    SCRIPT_FILE_SUFFIX = ".gp"
    CHART_TITLE = "ab-gnuplot"
    CHART_X_LABEL = "Request"
    CHART_Y_LABEL = "Response time (ms)"
    CONTAINER_CGROUP_MARKERS: Tuple[str, ...] = ("docker", "containerd", "kubepods", "lxc", "podman")
    HOST_GATEWAY_NAME = "host.docker.internal"


# How to install the external commands, by command and platform
INSTALL_INSTRUCTIONS: Dict[str, Dict[str, str]] = {
    "ab": {
        "linux": "Install it with `apt-get install apache2-utils` (Debian/Ubuntu), "
                 "`apk add apache2-utils` (Alpine) or `dnf install httpd-tools` (Fedora/RHEL).",
        "darwin": "It's shipped with macOS; otherwise install it with `brew install httpd`.",
        "win32": "Download the Apache binaries from https://www.apachelounge.com/download/ "
                 "and add the folder containing ab.exe to the PATH.",
    },
    "gnuplot": {
        "linux": "Install it with `apt-get install gnuplot` (Debian/Ubuntu), "
                 "`apk add gnuplot` (Alpine) or `dnf install gnuplot` (Fedora/RHEL).",
        "darwin": "Install it with `brew install gnuplot`.",
        "win32": "Download it from http://www.gnuplot.info/download.html "
                 "and add the folder containing gnuplot.exe to the PATH.",
    },
    "git": {
        "linux": "Install it with `apt-get install git` (Debian/Ubuntu), "
                 "`apk add git` (Alpine) or `dnf install git` (Fedora/RHEL).",
        "darwin": "Install it with `xcode-select --install` or `brew install git`.",
        "win32": "Download it from https://git-scm.com/download/win",
    },
    "composer": {
        "linux": "See https://getcomposer.org/download/",
        "darwin": "Install it with `brew install composer` or see https://getcomposer.org/download/",
        "win32": "Download the installer from https://getcomposer.org/download/",
    },
}
