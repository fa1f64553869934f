"""
Data model for the outcome of a watch run.
"""

from dataclasses import dataclass

from buildwatch.state.watch import WatchState


@dataclass
class WatchResult:
    """Final state reached by the watcher for one commit."""

    state: WatchState
    iterations: int
    build_num: int | None = None
    status: str | None = None
    build_url: str | None = None

    @property
    def exit_code(self) -> int:
        return 0 if self.state is WatchState.SUCCESS else 1
