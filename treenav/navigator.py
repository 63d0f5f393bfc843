"""Cursor that moves across providers at their natural boundaries."""

from __future__ import annotations

import logging

from .config import NavigatorConfig
from .exceptions import ConfigurationError
from .providers import NamespaceProvider, NavigationKind, NodeView

logger = logging.getLogger(__name__)


class Navigator:
    """Single cursor over a fixed registry of namespace providers.

    Each :meth:`advance` call hands the token to the active provider and then
    decides whether the cursor stays, ascends to ``parent_of[active]`` or
    descends into ``child_of[active]`` (falling back to the provider type
    named in an ``END_CHILD`` view). The target is rebased and queried before
    the cursor moves, so a ``ProviderError`` anywhere in the call leaves
    ``active`` where it was.
    """

    def __init__(self, config: NavigatorConfig) -> None:
        self._config = config
        self._active = config.root

    @property
    def active(self) -> str:
        return self._active

    @property
    def config(self) -> NavigatorConfig:
        return self._config

    def provider(self, provider_id: str) -> NamespaceProvider:
        try:
            return self._config.providers[provider_id]
        except KeyError as exc:
            raise ConfigurationError(f"Unknown provider: {provider_id}") from exc

    def current_view(self) -> NodeView:
        return self.provider(self._active).step("")

    def advance(self, token: str) -> NodeView:
        result = self.provider(self._active).step(token)
        if result.kind is NavigationKind.INSIDE:
            return result
        if result.kind is NavigationKind.ROOT_PARENT:
            target = self._config.parent_of.get(self._active)
            if target is None:
                logger.debug("No parent configured for %s; staying", self._active)
                return self.current_view()
            return self._switch(target, result.name)
        target = self._config.child_of.get(self._active)
        if target is not None:
            return self._switch(target, self._descent_spec(token))
        target = result.provider_type
        if target != self._active and target in self._config.providers:
            return self._switch(target, result.name)
        logger.debug("No child provider for %s from %s; staying", result.name, self._active)
        return self.current_view()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _descent_spec(self, token: str) -> str:
        separator = self._config.separator
        return token if token.endswith(separator) else token + separator

    def _switch(self, target: str, root_spec: str) -> NodeView:
        provider = self.provider(target)
        provider.rebase(root_spec)
        view = provider.step("")
        logger.debug("Cursor %s -> %s (rebased at %r)", self._active, target, root_spec)
        self._active = target
        return view


__all__ = ["Navigator"]
