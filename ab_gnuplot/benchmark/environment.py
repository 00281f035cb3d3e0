"""Probes the environment ab-gnuplot runs in."""
import ipaddress
import logging
import shutil
import socket
import struct
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional
from urllib.parse import urlsplit, urlunsplit

from ab_gnuplot.shared.config import Config
from .constants import BenchmarkConstants, INSTALL_INSTRUCTIONS
from .exceptions import GenericFailureError, MissingCommandError
from .models import Site


logger = logging.getLogger(__name__)

CGROUP_FILE = Path("/proc/1/cgroup")
DOCKERENV_FILE = Path("/.dockerenv")
ROUTE_FILE = Path("/proc/net/route")


class Environment:
    """Answers questions about the system, remembering the answers.

    One instance is created per run and passed to whoever needs it, so
    every probe is executed at most once.
    """

    def __init__(
        self,
        config: Config,
        platform: str = sys.platform,
        cgroup_file: Path = CGROUP_FILE,
        dockerenv_file: Path = DOCKERENV_FILE,
        route_file: Path = ROUTE_FILE,
    ):
        self.config = config
        self.platform = platform
        self.cgroup_file = cgroup_file
        self.dockerenv_file = dockerenv_file
        self.route_file = route_file
        self._commands: Dict[str, bool] = {}
        self._in_container: Optional[bool] = None
        self._host_ip: Optional[str] = None

    def command_exists(self, command: str) -> bool:
        if command not in self._commands:
            self._commands[command] = shutil.which(command) is not None
        return self._commands[command]

    def require_command(self, command: str, tool: Optional[str] = None) -> None:
        """
        Make sure that a command is available.

        Args:
            command: The command to look for (name or path).
            tool: The tool the command provides (ab, gnuplot, git, composer),
                used to pick the installation instructions.

        Raises:
            MissingCommandError: If the command can't be found.
        """
        if self.command_exists(command):
            return
        instructions = INSTALL_INSTRUCTIONS.get(tool or Path(command).stem, {})
        platform_key = "linux" if self.platform.startswith("linux") else self.platform
        raise MissingCommandError(command, instructions.get(platform_key, ""))

    def in_container(self) -> bool:
        """Check if we are running inside a container (docker, podman, kubernetes...)."""
        if self._in_container is None:
            self._in_container = self._detect_container()
            logger.debug(f"Running inside a container: {self._in_container}")
        return self._in_container

    def _detect_container(self) -> bool:
        if self.dockerenv_file.exists():
            return True
        try:
            cgroups = self.cgroup_file.read_text()
        except OSError:
            return False
        return any(marker in cgroups for marker in BenchmarkConstants.CONTAINER_CGROUP_MARKERS)

    def host_ip(self) -> str:
        """
        Get the IP address of the machine hosting the container.

        Raises:
            GenericFailureError: If the address can't be determined.
        """
        if self._host_ip is None:
            self._host_ip = self._resolve_host_ip()
            logger.debug(f"Host IP address: {self._host_ip}")
        return self._host_ip

    def _resolve_host_ip(self) -> str:
        try:
            return socket.gethostbyname(BenchmarkConstants.HOST_GATEWAY_NAME)
        except OSError:
            logger.debug(f"Unable to resolve {BenchmarkConstants.HOST_GATEWAY_NAME}, looking for the default gateway")
        gateway = self._default_gateway()
        if gateway is None:
            raise GenericFailureError(
                "Unable to determine the IP address of the host machine: "
                f"{BenchmarkConstants.HOST_GATEWAY_NAME} can't be resolved and there's no default gateway"
            )
        return gateway

    def _default_gateway(self) -> Optional[str]:
        try:
            lines = self.route_file.read_text().splitlines()
        except OSError:
            return None
        for line in lines[1:]:
            fields = line.split()
            if len(fields) >= 3 and fields[1] == "00000000":
                return socket.inet_ntoa(struct.pack("<L", int(fields[2], 16)))
        return None

    def resolve_site(self, url: str) -> Site:
        """
        Create the Site for a URL.

        When running in a container, URLs pointing to the loopback
        interface are redirected to the host machine.
        """
        if not self.in_container():
            return Site(url)
        hostname = urlsplit(url).hostname or ""
        if not _is_loopback(hostname):
            return Site(url)
        ip = self.host_ip()
        if _is_ip_address(hostname):
            # a literal address can't be remapped with the hosts file
            return Site(url, request_url=_replace_host(url, ip))
        return Site(url, ip=ip)

    @contextmanager
    def patch_hosts_file(self, site: Site) -> Iterator[None]:
        """
        Map the site host name to its IP address while the block runs.

        The original contents of the hosts file are always restored.
        """
        if not site.ip:
            yield
            return
        hosts_file = self.config.hosts_file
        original = hosts_file.read_bytes()
        logger.info(f"Mapping {site.hostname} to {site.ip} in {hosts_file}")
        try:
            hosts_file.write_bytes(f"{site.ip} {site.hostname}\n".encode() + original)
            yield
        finally:
            hosts_file.write_bytes(original)
            logger.debug(f"Restored {hosts_file}")


def _is_ip_address(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


def _is_loopback(hostname: str) -> bool:
    if not hostname:
        return False
    if _is_ip_address(hostname):
        return ipaddress.ip_address(hostname).is_loopback
    try:
        return ipaddress.ip_address(socket.gethostbyname(hostname)).is_loopback
    except OSError:
        return False


def _replace_host(url: str, ip: str) -> str:
    parts = urlsplit(url)
    host = f"[{ip}]" if ":" in ip else ip
    netloc = host if parts.port is None else f"{host}:{parts.port}"
    return urlunsplit(parts._replace(netloc=netloc))
