"""
Platform detection for fflint-action.

fflint publishes its release archives under vendor-style platform names
(``fflint_Linux_x86_64.tar.gz``, ``fflint_Windows_i386.zip``, ...). This
module reads the host's raw OS and CPU identifiers and maps them onto
those names.

Raw identifiers:
    OS:   ``sys.platform`` ('linux', 'darwin', 'win32', ...)
    CPU:  ``platform.machine()`` normalized to 'x64', 'x32', 'arm64', 'arm'

Values without a known vendor name are passed through unchanged and a
warning is logged; detection never fails.

Usage:
    from fflint_action.core.platform import detect_platform_tag

    tag = detect_platform_tag()
    print(f"{tag.os_name}_{tag.arch}")  # e.g. Linux_x86_64
"""

import logging
import platform
import sys
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

OS_NAMES = {
    "darwin": "Darwin",
    "linux": "Linux",
    "win32": "Windows",
}

ARCH_NAMES = {
    "x64": "x86_64",
    "x32": "i386",
    "arm": "arm64",
}


@dataclass(frozen=True)
class PlatformTag:
    """
    Vendor-style platform names used in release archive names.

    Attributes:
        os_name: Vendor OS name ('Linux', 'Darwin', 'Windows') or raw value
        arch: Vendor CPU name ('x86_64', 'i386', 'arm64') or raw value
        raw_os: Host OS identifier the tag was derived from
        raw_arch: Host CPU identifier the tag was derived from
    """

    os_name: str
    arch: str
    raw_os: str = ""
    raw_arch: str = ""

    @property
    def is_windows(self) -> bool:
        """True when the host is Windows."""
        return self.raw_os == "win32" or self.os_name == "Windows"

    def __str__(self) -> str:
        return f"{self.os_name}_{self.arch}"


def host_os() -> str:
    """Return the raw host OS identifier."""
    return sys.platform


def host_arch() -> str:
    """
    Return the raw host CPU identifier.

    Returns:
        'x64', 'x32', 'arm64', 'arm', or the lower-cased machine name
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("i386", "i686", "x86", "x32"):
        return "x32"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine.startswith("arm"):
        return "arm"
    else:
        return machine


def map_os(raw_os: str, log: Optional[logging.Logger] = None) -> str:
    """
    Map a raw OS identifier to its vendor name.

    Args:
        raw_os: Host OS identifier (e.g. 'linux')
        log: Logger for the unknown-OS warning (module logger if None)

    Returns:
        Vendor OS name, or ``raw_os`` unchanged if it is not known
    """
    name = OS_NAMES.get(raw_os)
    if name is None:
        (log or logger).warning(f"Unknown OS {raw_os}")
        return raw_os
    return name


def map_arch(raw_arch: str, log: Optional[logging.Logger] = None) -> str:
    """
    Map a raw CPU identifier to its vendor name.

    Args:
        raw_arch: Host CPU identifier (e.g. 'x64')
        log: Logger for the unknown-arch warning (module logger if None)

    Returns:
        Vendor CPU name, or ``raw_arch`` unchanged if it is not known
    """
    name = ARCH_NAMES.get(raw_arch)
    if name is None:
        (log or logger).warning(f"Unknown arch {raw_arch}")
        return raw_arch
    return name


def detect_platform_tag(
    raw_os: Optional[str] = None,
    raw_arch: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> PlatformTag:
    """
    Build the PlatformTag for the host (or for the given raw identifiers).

    Args:
        raw_os: Override for the host OS identifier
        raw_arch: Override for the host CPU identifier
        log: Logger for unknown-platform warnings

    Returns:
        PlatformTag with vendor names

    Example:
        >>> detect_platform_tag("linux", "x64")
        PlatformTag(os_name='Linux', arch='x86_64', raw_os='linux', raw_arch='x64')
    """
    raw_os = raw_os if raw_os is not None else host_os()
    raw_arch = raw_arch if raw_arch is not None else host_arch()

    return PlatformTag(
        os_name=map_os(raw_os, log),
        arch=map_arch(raw_arch, log),
        raw_os=raw_os,
        raw_arch=raw_arch,
    )


__all__ = [
    "PlatformTag",
    "OS_NAMES",
    "ARCH_NAMES",
    "host_os",
    "host_arch",
    "map_os",
    "map_arch",
    "detect_platform_tag",
]
