"""Provider protocol and the view dataclasses every step returns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

PARENT_TOKEN = ".."


class NavigationKind(Enum):
    """Where a step landed relative to the provider that handled it."""

    INSIDE = "inside"
    ROOT_PARENT = "root_parent"
    END_CHILD = "end_child"


@dataclass(frozen=True)
class NodeView:
    """Snapshot of the node a provider considers current after a step."""

    name: str
    children: tuple[str, ...]
    kind: NavigationKind
    provider_type: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        if self.kind is NavigationKind.END_CHILD and self.children:
            raise ValueError("END_CHILD views cannot carry children")

    @staticmethod
    def inside(name: str, children: Iterable[str], provider_type: str) -> "NodeView":
        return NodeView(name, tuple(children), NavigationKind.INSIDE, provider_type)

    @staticmethod
    def root_parent(
        name: str,
        provider_type: str,
        children: Iterable[str] = (),
    ) -> "NodeView":
        return NodeView(name, tuple(children), NavigationKind.ROOT_PARENT, provider_type)

    @staticmethod
    def end_child(name: str, provider_type: str) -> "NodeView":
        return NodeView(name, (), NavigationKind.END_CHILD, provider_type)


class NamespaceProvider:
    """Uniform cursor over one hierarchical namespace.

    ``step`` never raises for unrecognized input; it returns the current view
    with ``NavigationKind.INSIDE`` instead. The only exceptional outcome is
    :class:`~treenav.exceptions.ProviderError`, raised when the namespace
    cannot be enumerated, and it leaves the provider's position untouched.
    """

    def step(self, token: str) -> NodeView:
        raise NotImplementedError

    def rebase(self, root_spec: str) -> None:
        raise NotImplementedError

    def provider_type(self) -> str:
        raise NotImplementedError


__all__ = ["PARENT_TOKEN", "NavigationKind", "NodeView", "NamespaceProvider"]
