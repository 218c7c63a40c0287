"""Context-local plugin activation."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from comparepack.plugins.manager import PluginManager

_ACTIVE_PLUGIN_MANAGER: ContextVar[PluginManager | None] = ContextVar(
    "comparepack_active_plugin_manager",
    default=None,
)


def get_active_plugin_manager() -> PluginManager | None:
    """Return the manager activated for the current context, if any."""
    return _ACTIVE_PLUGIN_MANAGER.get()


@contextmanager
def use_plugin_manager(manager: PluginManager) -> Iterator[PluginManager]:
    """Activate ``manager`` for diffs run inside the block."""
    token = _ACTIVE_PLUGIN_MANAGER.set(manager)
    try:
        yield manager
    finally:
        _ACTIVE_PLUGIN_MANAGER.reset(token)


@contextmanager
def use_plugins(*plugins: object) -> Iterator[PluginManager]:
    """Wrap ``plugins`` in a fresh manager and activate it for the block."""
    with use_plugin_manager(PluginManager(plugins=plugins)) as manager:
        yield manager
