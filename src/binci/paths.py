"""Cross-platform path utilities for Docker mount compatibility.

Handles relative volume mounts and conversion of the host working directory
into a POSIX-style path the container can use as its work dir.
Docker expects POSIX-style paths: /c/Users/... (not C:\\Users\\...)
"""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING

from .logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = get_logger(__name__)

# \\?\C:\... and \\?\UNC\server\share\...
_EXTENDED_PREFIX = "\\\\?\\"
_EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"


def is_windows_path(path: str | Path) -> bool:
    """Check if path is a Windows-style path (e.g., D:\\GitHub or D:/GitHub).

    Args:
        path: Path to check.

    Returns:
        True if path looks like a Windows path (has drive letter).
    """
    return bool(re.match(r"^[A-Za-z]:([/\\]|$)", str(path)))


def is_unc_path(path: str | Path) -> bool:
    """Check if path is a UNC share path (e.g., \\\\server\\share)."""
    path_str = str(path)
    return path_str.startswith("\\\\") and not path_str.startswith(_EXTENDED_PREFIX)


def _normalize_path_separators(path_str: str) -> str:
    """Normalize path separators to forward slashes and remove duplicates.

    Args:
        path_str: Path string to normalize.

    Returns:
        Normalized path with single forward slashes.
    """
    normalized = path_str.replace("\\", "/")
    while "//" in normalized:
        normalized = normalized.replace("//", "/")
    # Remove trailing slash (unless it's root)
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    return normalized


def _strip_extended_prefix(path_str: str) -> str:
    """Remove the Windows extended-length prefix, keeping UNC shares as UNC."""
    if path_str.startswith(_EXTENDED_UNC_PREFIX):
        return "\\\\" + path_str[len(_EXTENDED_UNC_PREFIX) :]
    if path_str.startswith(_EXTENDED_PREFIX):
        return path_str[len(_EXTENDED_PREFIX) :]
    return path_str


def windows_to_docker_path(path: str | Path) -> str:
    """Convert Windows path to Docker compatible format.

    Drive letters become a lowercase leading segment:
    D:\\GitHub\\Project -> /d/GitHub/Project

    Examples:
        >>> windows_to_docker_path("D:\\\\GitHub\\\\Project")
        '/d/GitHub/Project'
        >>> windows_to_docker_path("C:/Users/name/project")
        '/c/Users/name/project'
        >>> windows_to_docker_path("C:\\\\")
        '/c'
    """
    path_str = str(path)

    match = re.match(r"^([A-Za-z]):[/\\]*(.*)$", path_str)
    if not match:
        return path_str  # Not a Windows path, return as-is

    drive = match.group(1).lower()
    rest = _normalize_path_separators(match.group(2))

    if not rest:
        return f"/{drive}"
    return f"/{drive}/{rest}"


def unc_to_docker_path(path: str | Path) -> str:
    """Convert UNC share path to POSIX format.

    Examples:
        >>> unc_to_docker_path("\\\\\\\\server\\\\share\\\\project")
        '/server/share/project'
    """
    path_str = str(path)
    if not is_unc_path(path_str):
        return path_str
    normalized = _normalize_path_separators(path_str[2:])
    return f"/{normalized}" if normalized else "/"


def wsl_to_docker_path(path: str | Path) -> str:
    """Convert WSL path to Docker compatible format.

    WSL paths like /mnt/d/GitHub/Project become /d/GitHub/Project.

    Examples:
        >>> wsl_to_docker_path("/mnt/c/Users/name/project")
        '/c/Users/name/project'
        >>> wsl_to_docker_path("/mnt/d/")
        '/d'
    """
    path_str = str(path)

    match = re.match(r"^/mnt/([a-z])(?:/(.*))?$", path_str)
    if match:
        drive = match.group(1)
        rest = _normalize_path_separators(match.group(2) or "")
        if not rest:
            return f"/{drive}"
        return f"/{drive}/{rest}"

    return path_str


def dewindowize(path: str | Path) -> str:
    """Resolve a host path to a POSIX path usable inside the container.

    Handles:
    - Extended-length prefix (\\\\?\\C:\\...) -> stripped first
    - Windows paths (D:\\GitHub\\...) -> /d/GitHub/...
    - UNC shares (\\\\server\\share\\...) -> /server/share/...
    - WSL paths (/mnt/d/...) -> /d/...
    - Native Linux/macOS paths -> unchanged

    Args:
        path: Absolute host path (typically the working directory).

    Returns:
        POSIX path string.
    """
    path_str = _strip_extended_prefix(str(path))

    if is_windows_path(path_str):
        return windows_to_docker_path(path_str)

    if is_unc_path(path_str):
        return unc_to_docker_path(path_str)

    path_str = path_str.replace("\\", "/")
    if re.match(r"^/mnt/[a-z](/|$)", path_str):
        return wsl_to_docker_path(path_str)

    return path_str


def resolve_volume(volume: str, cwd: str) -> str:
    """Resolve a relative host segment of a volume spec against cwd.

    Only entries starting with '.' are rewritten. The host segment (up to the
    first ':') becomes an absolute, normalized path; the rest is kept verbatim.

    Examples:
        >>> resolve_volume("./data:/data:ro", "/home/user/app")
        '/home/user/app/data:/data:ro'
        >>> resolve_volume("/var/run/docker.sock:/var/run/docker.sock", "/x")
        '/var/run/docker.sock:/var/run/docker.sock'
    """
    if not volume.startswith("."):
        return volume
    host, sep, rest = volume.partition(":")
    resolved = os.path.normpath(os.path.join(cwd, host))
    return f"{resolved}{sep}{rest}"


def resolve_volumes(volumes: Iterable[str], cwd: str) -> list[str]:
    """Resolve relative volume specs against cwd, preserving order."""
    resolved = [resolve_volume(str(v), cwd) for v in volumes]
    logger.debug("Resolved volumes: %s", resolved)
    return resolved
