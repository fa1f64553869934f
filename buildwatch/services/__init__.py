# Services module - external API integrations
from .circleci import CircleCIClient
from .watcher import BuildWatcher

__all__ = ["CircleCIClient", "BuildWatcher"]
