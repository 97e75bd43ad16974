"""Tests for path conversion utilities."""

from __future__ import annotations

from pathlib import Path

from binci.paths import (
    _normalize_path_separators,
    dewindowize,
    is_unc_path,
    is_windows_path,
    resolve_volume,
    resolve_volumes,
    unc_to_docker_path,
    windows_to_docker_path,
    wsl_to_docker_path,
)


class TestIsWindowsPath:
    """Tests for is_windows_path function."""

    def test_windows_backslash_path(self) -> None:
        assert is_windows_path(r"D:\GitHub\Project") is True

    def test_windows_forward_slash_path(self) -> None:
        assert is_windows_path("D:/GitHub/Project") is True

    def test_windows_drive_only(self) -> None:
        assert is_windows_path("C:") is True
        assert is_windows_path("C:/") is True

    def test_linux_path(self) -> None:
        assert is_windows_path("/home/user/project") is False

    def test_relative_path(self) -> None:
        assert is_windows_path("./project") is False

    def test_pathlib_path(self) -> None:
        assert is_windows_path(Path("/home/user")) is False


class TestNormalizePathSeparators:
    """Tests for _normalize_path_separators function."""

    def test_backslashes_converted(self) -> None:
        assert _normalize_path_separators(r"foo\bar\baz") == "foo/bar/baz"

    def test_double_slashes_removed(self) -> None:
        assert _normalize_path_separators("foo//bar///baz") == "foo/bar/baz"

    def test_trailing_slash_removed(self) -> None:
        assert _normalize_path_separators("foo/bar/") == "foo/bar"

    def test_root_slash_preserved(self) -> None:
        assert _normalize_path_separators("/") == "/"

    def test_empty_string(self) -> None:
        assert _normalize_path_separators("") == ""


class TestWindowsToDockerPath:
    """Tests for windows_to_docker_path function."""

    def test_basic_conversion(self) -> None:
        assert windows_to_docker_path(r"D:\GitHub\Project") == "/d/GitHub/Project"

    def test_forward_slash_input(self) -> None:
        assert windows_to_docker_path("C:/Users/name/project") == "/c/Users/name/project"

    def test_mixed_slashes(self) -> None:
        assert windows_to_docker_path(r"D:\GitHub/Mixed\Path") == "/d/GitHub/Mixed/Path"

    def test_trailing_slash_removed(self) -> None:
        assert windows_to_docker_path("D:/Project/") == "/d/Project"

    def test_path_with_spaces(self) -> None:
        assert windows_to_docker_path(r"C:\Program Files\App") == "/c/Program Files/App"

    def test_root_drive_only(self) -> None:
        assert windows_to_docker_path("C:/") == "/c"
        assert windows_to_docker_path("D:") == "/d"

    def test_non_windows_path_unchanged(self) -> None:
        assert windows_to_docker_path("/home/user/project") == "/home/user/project"


class TestUncPaths:
    """Tests for UNC share handling."""

    def test_is_unc(self) -> None:
        assert is_unc_path(r"\\server\share") is True
        assert is_unc_path("/home/user") is False

    def test_extended_prefix_is_not_unc(self) -> None:
        assert is_unc_path("\\\\?\\C:\\Users") is False

    def test_conversion(self) -> None:
        assert unc_to_docker_path(r"\\server\share\project") == "/server/share/project"

    def test_non_unc_unchanged(self) -> None:
        assert unc_to_docker_path("/srv/share") == "/srv/share"


class TestWslToDockerPath:
    """Tests for wsl_to_docker_path function."""

    def test_basic_conversion(self) -> None:
        assert wsl_to_docker_path("/mnt/c/Users/name/project") == "/c/Users/name/project"

    def test_root_drive_only(self) -> None:
        assert wsl_to_docker_path("/mnt/c") == "/c"
        assert wsl_to_docker_path("/mnt/d/") == "/d"

    def test_mnt_but_not_drive_unchanged(self) -> None:
        assert wsl_to_docker_path("/mnt/somedir/file") == "/mnt/somedir/file"


class TestDewindowize:
    """Tests for dewindowize function."""

    def test_linux_path_unchanged(self) -> None:
        assert dewindowize("/home/user/project") == "/home/user/project"

    def test_windows_drive(self) -> None:
        assert dewindowize(r"C:\Users\name\project") == "/c/Users/name/project"

    def test_extended_prefix_stripped(self) -> None:
        assert dewindowize("\\\\?\\C:\\Users\\name") == "/c/Users/name"

    def test_extended_unc_prefix(self) -> None:
        assert dewindowize("\\\\?\\UNC\\server\\share\\app") == "/server/share/app"

    def test_unc_share(self) -> None:
        assert dewindowize(r"\\server\share\app") == "/server/share/app"

    def test_wsl_mount(self) -> None:
        assert dewindowize("/mnt/d/GitHub/Project") == "/d/GitHub/Project"

    def test_mnt_non_drive_unchanged(self) -> None:
        assert dewindowize("/mnt/data/files") == "/mnt/data/files"

    def test_pathlib_input(self) -> None:
        assert dewindowize(Path("/srv/app")) == "/srv/app"


class TestResolveVolumes:
    """Tests for relative volume resolution."""

    def test_relative_host_resolved(self) -> None:
        assert resolve_volume("./data:/data", "/home/user/app") == "/home/user/app/data:/data"

    def test_mode_preserved(self) -> None:
        result = resolve_volume("./data:/data:ro", "/home/user/app")
        assert result == "/home/user/app/data:/data:ro"

    def test_parent_directory(self) -> None:
        assert resolve_volume("../shared:/shared", "/home/user/app") == "/home/user/shared:/shared"

    def test_current_directory(self) -> None:
        assert resolve_volume(".:/app", "/home/user/app") == "/home/user/app:/app"

    def test_container_part_verbatim(self) -> None:
        result = resolve_volume("./a:/x/../y", "/srv")
        assert result == "/srv/a:/x/../y"

    def test_absolute_unchanged(self) -> None:
        volume = "/var/run/docker.sock:/var/run/docker.sock"
        assert resolve_volume(volume, "/srv") == volume

    def test_named_volume_unchanged(self) -> None:
        assert resolve_volume("cache:/cache", "/srv") == "cache:/cache"

    def test_host_only(self) -> None:
        assert resolve_volume("./data", "/srv") == "/srv/data"

    def test_order_preserved(self) -> None:
        volumes = ["./b:/b", "/a:/a", "./c:/c"]
        assert resolve_volumes(volumes, "/srv") == ["/srv/b:/b", "/a:/a", "/srv/c:/c"]

    def test_resolved_is_absolute(self) -> None:
        for volume in resolve_volumes(["./x:/x", "./y/z:/z"], "/home/user"):
            assert volume.startswith("/home/user/")
