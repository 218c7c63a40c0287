"""Hook dispatch around a diff, isolated from plugin failures."""

from __future__ import annotations

from dataclasses import dataclass, field
import warnings

from comparepack.plugins.base import DiffEndEvent, DiffStartEvent


@dataclass(frozen=True, slots=True)
class PluginDiagnostic:
    plugin_name: str
    hook: str
    error_type: str
    message: str

    def describe(self) -> str:
        return (
            f"TextCompare plugin failure: plugin={self.plugin_name} "
            f"hook={self.hook} error={self.error_type}: {self.message}"
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "plugin_name": self.plugin_name,
            "hook": self.hook,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass(slots=True)
class PluginManager:
    """Runs plugin hooks for each diff and remembers the latest outcome.

    A plugin that raises never breaks the diff: the failure is kept in
    ``diagnostics`` and reported as a ``RuntimeWarning``.
    """

    plugins: tuple[object, ...] = ()
    diagnostics: list[PluginDiagnostic] = field(default_factory=list)
    last_outcome: DiffEndEvent | None = None

    def clear_diagnostics(self) -> None:
        self.diagnostics.clear()

    def on_diff_start(self, event: DiffStartEvent) -> None:
        for plugin in self.plugins:
            self._call(plugin, "on_diff_start", event)

    def on_diff_end(self, event: DiffEndEvent) -> None:
        self.last_outcome = event
        for plugin in self.plugins:
            self._call(plugin, "on_diff_end", event)

    def _call(self, plugin: object, hook: str, event: object) -> None:
        callback = getattr(plugin, hook, None)
        if callback is None:
            return
        try:
            callback(event)
        except Exception as error:
            diagnostic = PluginDiagnostic(
                plugin_name=str(getattr(plugin, "name", type(plugin).__name__)),
                hook=hook,
                error_type=type(error).__name__,
                message=str(error),
            )
            self.diagnostics.append(diagnostic)
            warnings.warn(diagnostic.describe(), RuntimeWarning, stacklevel=3)
