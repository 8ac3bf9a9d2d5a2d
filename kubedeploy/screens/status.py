"""Inline status text for synchronized collections."""

from __future__ import annotations

from rich.markup import escape

from kubedeploy.constants.enums import ViewState
from kubedeploy.utils.sync_manager import CachedView


def describe_view(view: CachedView, noun: str) -> str:
    """One status line per observable state.

    Loading, error, stale-but-present and ready each read differently, so a
    failed refresh never looks like an empty collection.
    """
    state = view.state
    if state is ViewState.LOADING:
        return f"Loading {noun}..."
    if state is ViewState.ERROR:
        return f"[red]Failed to load {noun}: {escape(view.error or '')}[/red]"
    count = len(view.data)
    if state is ViewState.STALE:
        if view.error:
            return (
                f"[yellow]{count} {noun} (refresh failed: "
                f"{escape(view.error)})[/yellow]"
            )
        return f"[yellow]{count} {noun} (refreshing...)[/yellow]"
    return f"{count} {noun}"


__all__ = ["describe_view"]
