"""Plain-text rendering of node views."""

from __future__ import annotations

from .providers import NodeView


def render_view(view: NodeView) -> str:
    lines = [f"Current: {view.name}", "Contents:"]
    lines.extend(f"  {child}" for child in view.children)
    return "\n".join(lines)


__all__ = ["render_view"]
