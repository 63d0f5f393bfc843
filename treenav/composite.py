"""Composite provider that stacks several namespaces under one index root."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .providers import PARENT_TOKEN, NamespaceProvider, NodeView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unselected:
    """Index view: every branch root is listed."""


@dataclass(frozen=True)
class Selected:
    """A branch has been picked and handed off to the navigator."""

    index: int


SelectionState = Unselected | Selected


class CompositeProvider(NamespaceProvider):
    """Expose an ordered list of providers as ``"<index>:<type>"`` entries.

    Selecting an entry is a one-shot hand-off: the composite reports
    ``END_CHILD`` naming the branch type and never forwards later steps into
    the branch. ``..`` from a selected branch is intercepted here and returns
    to the index.
    """

    def __init__(
        self,
        provider_type: str,
        branches: Sequence[NamespaceProvider],
        *,
        label: str | None = None,
    ) -> None:
        if not branches:
            raise ConfigurationError(f"Composite {provider_type} needs at least one branch")
        self._type = provider_type
        self._label = label or provider_type
        self._branches: tuple[NamespaceProvider, ...] = tuple(branches)
        self._selection: SelectionState = Unselected()

    @property
    def branches(self) -> tuple[NamespaceProvider, ...]:
        return self._branches

    @property
    def selection(self) -> SelectionState:
        return self._selection

    def provider_type(self) -> str:
        return self._type

    def rebase(self, root_spec: str) -> None:
        self._selection = Unselected()

    def step(self, token: str) -> NodeView:
        if isinstance(self._selection, Selected):
            if token == PARENT_TOKEN:
                self._selection = Unselected()
                return self._index_view()
            return self._handoff_view(self._selection.index)
        if token == PARENT_TOKEN:
            return NodeView.root_parent(self._label, self._type)
        index = self._parse_index(token)
        if index is None:
            return self._index_view()
        self._selection = Selected(index)
        logger.debug("Composite %s selected branch %d", self._type, index)
        return self._handoff_view(index)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _index_view(self) -> NodeView:
        entries = [f"{idx}:{branch.provider_type()}" for idx, branch in enumerate(self._branches)]
        return NodeView.inside(self._label, entries, self._type)

    def _handoff_view(self, index: int) -> NodeView:
        branch_type = self._branches[index].provider_type()
        return NodeView.end_child(branch_type, branch_type)

    def _parse_index(self, token: str) -> int | None:
        prefix = token.split(":", 1)[0]
        if not prefix.isdecimal():
            return None
        index = int(prefix)
        if index >= len(self._branches):
            return None
        return index


__all__ = ["CompositeProvider", "Selected", "SelectionState", "Unselected"]
