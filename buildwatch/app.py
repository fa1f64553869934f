"""
Application factory and main entry point.
"""

from buildwatch.core.config import Settings, load_settings
from buildwatch.core.exceptions import BuildWatchError
from buildwatch.core.logging import get_logger, set_level, setup_logging
from buildwatch.services.circleci import CircleCIClient
from buildwatch.services.watcher import BuildWatcher

logger = get_logger(__name__)


def create_watcher(settings: Settings) -> BuildWatcher:
    """Create a watcher wired to the configured CircleCI project."""
    client = CircleCIClient(
        base_url=settings.circle_ci_api_url,
        project=settings.ci_project_name,
        token=settings.circle_ci_api_token,
        timeout=settings.circle_ci_timeout,
    )
    return BuildWatcher(settings.to_watch_config(), client)


async def main() -> int:
    """Main application entry point. Returns the process exit code."""
    setup_logging()

    try:
        settings = load_settings()
    except BuildWatchError as e:
        logger.error("%s", e)
        return 1

    set_level(settings.log_level)
    logger.info(
        "Watching CircleCI project %s, branch %s, commit %s",
        settings.ci_project_name,
        settings.ci_commit_ref_name,
        settings.ci_commit_sha,
    )

    try:
        watcher = create_watcher(settings)
        result = await watcher.run()
    except BuildWatchError as e:
        logger.error("There was an error querying CircleCI: %s", e)
        return 1

    logger.info(
        "Finished in state %s after %s iteration(s)", result.state.value, result.iterations
    )
    return result.exit_code
