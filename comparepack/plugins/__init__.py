"""Plugin hooks fired around every diff."""

from comparepack.plugins.base import DiffEndEvent, DiffStartEvent, LifecyclePlugin
from comparepack.plugins.manager import PluginDiagnostic, PluginManager
from comparepack.plugins.reference import DiffStatsPlugin, DiffTracePlugin
from comparepack.plugins.runtime import (
    get_active_plugin_manager,
    use_plugin_manager,
    use_plugins,
)

__all__ = [
    "DiffStartEvent",
    "DiffEndEvent",
    "LifecyclePlugin",
    "PluginDiagnostic",
    "PluginManager",
    "DiffTracePlugin",
    "DiffStatsPlugin",
    "get_active_plugin_manager",
    "use_plugin_manager",
    "use_plugins",
]
