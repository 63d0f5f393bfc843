"""Registry and adjacency configuration consumed by the navigator."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .composite import CompositeProvider
from .exceptions import ConfigurationError
from .namespaces import (
    DISK_TYPE,
    FILESYSTEM_TYPE,
    WINDOWS_TYPE,
    DiskProvider,
    FileSystemProvider,
    VolumeLister,
    WindowLister,
    WindowsProvider,
)
from .providers import NamespaceProvider

logger = logging.getLogger(__name__)

ROOT_ID = "root"
ROOT_LABEL = "Namespaces"


@dataclass(frozen=True)
class NavigatorConfig:
    """Immutable registry plus the parent/child tables used for transitions."""

    providers: Mapping[str, NamespaceProvider]
    root: str
    parent_of: Mapping[str, str]
    child_of: Mapping[str, str]
    separator: str = os.sep

    def __post_init__(self) -> None:
        object.__setattr__(self, "providers", MappingProxyType(dict(self.providers)))
        object.__setattr__(self, "parent_of", MappingProxyType(dict(self.parent_of)))
        object.__setattr__(self, "child_of", MappingProxyType(dict(self.child_of)))
        self._validate()

    @classmethod
    def build(
        cls,
        providers: Iterable[NamespaceProvider],
        *,
        root: str,
        parent_of: Mapping[str, str] | None = None,
        child_of: Mapping[str, str] | None = None,
        separator: str = os.sep,
    ) -> "NavigatorConfig":
        registry: dict[str, NamespaceProvider] = {}
        for provider in providers:
            provider_id = provider.provider_type()
            if provider_id in registry:
                raise ConfigurationError(f"Duplicate provider id: {provider_id}")
            registry[provider_id] = provider
        return cls(
            providers=registry,
            root=root,
            parent_of=parent_of or {},
            child_of=child_of or {},
            separator=separator,
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def _validate(self) -> None:
        if not self.separator:
            raise ConfigurationError("Separator must not be empty")
        if self.root not in self.providers:
            raise ConfigurationError(f"Root provider {self.root} is not registered")
        for provider_id, provider in self.providers.items():
            if provider.provider_type() != provider_id:
                raise ConfigurationError(
                    f"Provider registered as {provider_id} reports type {provider.provider_type()}"
                )
        for table_name, table in (("parent_of", self.parent_of), ("child_of", self.child_of)):
            for source, target in table.items():
                for provider_id in (source, target):
                    if provider_id not in self.providers:
                        raise ConfigurationError(
                            f"{table_name} references unregistered provider {provider_id}"
                        )
        for provider in self.providers.values():
            if isinstance(provider, CompositeProvider):
                self._validate_branches(provider)

    def _validate_branches(self, composite: CompositeProvider) -> None:
        for branch in composite.branches:
            branch_id = branch.provider_type()
            registered = self.providers.get(branch_id)
            if registered is None:
                raise ConfigurationError(
                    f"Composite {composite.provider_type()} references unregistered branch {branch_id}"
                )
            if registered is not branch:
                raise ConfigurationError(
                    f"Composite {composite.provider_type()} holds a different {branch_id} instance"
                )


def default_config(
    *,
    fs_root: str | os.PathLike[str] | None = None,
    list_volumes: VolumeLister | None = None,
    list_windows: WindowLister | None = None,
    separator: str = os.sep,
) -> NavigatorConfig:
    """Volumes and windows under one index root, with volumes descending into folders."""

    disk = DiskProvider(list_volumes)
    windows = WindowsProvider(list_windows)
    filesystem = FileSystemProvider(fs_root)
    root = CompositeProvider(ROOT_ID, [disk, windows], label=ROOT_LABEL)
    config = NavigatorConfig.build(
        [root, disk, filesystem, windows],
        root=ROOT_ID,
        parent_of={
            DISK_TYPE: ROOT_ID,
            WINDOWS_TYPE: ROOT_ID,
            FILESYSTEM_TYPE: DISK_TYPE,
        },
        child_of={DISK_TYPE: FILESYSTEM_TYPE},
        separator=separator,
    )
    logger.debug("Built default configuration with providers %s", sorted(config.providers))
    return config


__all__ = ["NavigatorConfig", "ROOT_ID", "ROOT_LABEL", "default_config"]
