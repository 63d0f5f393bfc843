"""Concrete leaf providers: volumes, folder trees and open windows."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

import psutil

from .exceptions import ProviderError
from .providers import PARENT_TOKEN, NamespaceProvider, NodeView

logger = logging.getLogger(__name__)

DISK_TYPE = "Disk"
FILESYSTEM_TYPE = "FileSystem"
WINDOWS_TYPE = "Windows"

VolumeLister = Callable[[], Iterable[str]]
WindowLister = Callable[[], Iterable[str]]


def _strip_separator(mountpoint: str) -> str:
    stripped = mountpoint.rstrip("\\/")
    return stripped or mountpoint


def list_mounted_volumes() -> list[str]:
    """Return mountpoints of the physical partitions, without trailing separators."""

    return [_strip_separator(part.mountpoint) for part in psutil.disk_partitions(all=False)]


def list_process_windows() -> list[str]:
    """Return the distinct names of running processes, sorted."""

    names: set[str] = set()
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if name:
            names.add(name)
    return sorted(names)


def _enumerate(lister: Callable[[], Iterable[str]], what: str) -> tuple[str, ...]:
    try:
        return tuple(lister())
    except (psutil.Error, OSError) as exc:
        raise ProviderError(f"Unable to list {what}: {exc}") from exc


class DiskProvider(NamespaceProvider):
    """Flat list of storage volumes; a volume name hands off to its folder tree."""

    display_name = "Disks"

    def __init__(self, list_volumes: VolumeLister | None = None) -> None:
        self._list_volumes = list_volumes or list_mounted_volumes

    def provider_type(self) -> str:
        return DISK_TYPE

    def rebase(self, root_spec: str) -> None:
        return None

    def step(self, token: str) -> NodeView:
        if token == PARENT_TOKEN:
            return NodeView.root_parent(self.display_name, DISK_TYPE)
        volumes = _enumerate(self._list_volumes, "volumes")
        if token and token in volumes:
            logger.debug("Volume %s selected", token)
            return NodeView.end_child(token, DISK_TYPE)
        return NodeView.inside(self.display_name, volumes, DISK_TYPE)


class FileSystemProvider(NamespaceProvider):
    """Folder tree rooted at a rebase-supplied path."""

    def __init__(self, root: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(root) if root is not None else Path(os.path.abspath(os.sep))

    @property
    def path(self) -> Path:
        return self._path

    def provider_type(self) -> str:
        return FILESYSTEM_TYPE

    def rebase(self, root_spec: str) -> None:
        self._path = Path(root_spec)

    def step(self, token: str) -> NodeView:
        if not token:
            return self._view(self._path)
        if token == PARENT_TOKEN and self._path.parent == self._path:
            return NodeView.root_parent(str(self._path), FILESYSTEM_TYPE)
        target = Path(os.path.normpath(os.path.join(self._path, token)))
        try:
            is_file = target.is_file()
            is_dir = not is_file and target.is_dir()
        except OSError as exc:
            raise ProviderError(f"Unable to inspect {target}: {exc}") from exc
        if is_file:
            return NodeView.end_child(str(target), FILESYSTEM_TYPE)
        if is_dir:
            view = self._view(target)
            self._path = target
            logger.debug("FileSystem moved to %s", target)
            return view
        return self._view(self._path)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _view(self, path: Path) -> NodeView:
        return NodeView.inside(str(path), self._list(path), FILESYSTEM_TYPE)

    def _list(self, path: Path) -> list[str]:
        try:
            return sorted(entry.name for entry in os.scandir(path))
        except OSError as exc:
            raise ProviderError(f"Unable to list {path}: {exc}") from exc


class WindowsProvider(NamespaceProvider):
    """Single-level list of open application windows."""

    display_name = "Open Windows"

    def __init__(self, list_windows: WindowLister | None = None) -> None:
        self._list_windows = list_windows or list_process_windows

    def provider_type(self) -> str:
        return WINDOWS_TYPE

    def rebase(self, root_spec: str) -> None:
        return None

    def step(self, token: str) -> NodeView:
        if token == PARENT_TOKEN:
            return NodeView.root_parent(self.display_name, WINDOWS_TYPE)
        titles = _enumerate(self._list_windows, "windows")
        return NodeView.inside(self.display_name, titles, WINDOWS_TYPE)


__all__ = [
    "DISK_TYPE",
    "FILESYSTEM_TYPE",
    "WINDOWS_TYPE",
    "DiskProvider",
    "FileSystemProvider",
    "WindowsProvider",
    "list_mounted_volumes",
    "list_process_windows",
]
