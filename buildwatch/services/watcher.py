"""
Build watcher: locate the CircleCI build for a commit and wait for its result.
"""

import asyncio
from typing import Awaitable, Callable

from buildwatch.core.config import WatchConfig
from buildwatch.core.logging import get_logger
from buildwatch.models.result import WatchResult
from buildwatch.models.status import BuildOutcome, classify_status
from buildwatch.services.circleci import CircleCIClient
from buildwatch.state.watch import IterationBudget, WatchState

logger = get_logger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class BuildWatcher:
    """
    Runs the searching -> found -> polling state machine for one commit.

    Discovery and monitoring draw from a single iteration budget, so time
    spent waiting for the build to appear shortens the monitoring window.
    """

    def __init__(
        self,
        config: WatchConfig,
        client: CircleCIClient,
        sleep: SleepFunc = asyncio.sleep,
    ):
        self._config = config
        self._client = client
        self._sleep = sleep
        self._budget = IterationBudget(config.max_iterations)
        self._state = WatchState.SEARCHING
        self._build_num: int | None = None
        self._status: str | None = None
        self._build_url: str | None = None

    @property
    def state(self) -> WatchState:
        return self._state

    async def run(self) -> WatchResult:
        """
        Drive the state machine until a terminal state.

        Raises:
            CircleCIAPIError: On any failed query, without spending remaining budget
        """
        while not self._state.is_terminal:
            if self._state is WatchState.SEARCHING:
                await self._search()
            elif self._state is WatchState.FOUND:
                self._state = WatchState.POLLING
            elif self._state is WatchState.POLLING:
                await self._poll()

        return WatchResult(
            state=self._state,
            iterations=self._budget.used,
            build_num=self._build_num,
            status=self._status,
            build_url=self._build_url,
        )

    async def _wait(self) -> None:
        await self._sleep(self._config.interval)
        self._budget.consume()

    async def _search(self) -> None:
        if self._budget.exhausted:
            logger.error(
                "Unable to locate a build in CircleCI for commit %s", self._config.commit_sha
            )
            self._state = WatchState.EXHAUSTED
            return

        build_num = await self._client.find_build(
            self._config.branch, self._config.commit_sha, self._config.limit
        )
        if build_num is None:
            logger.info("Not found, waiting %ss before checking again", self._config.interval)
            await self._wait()
            return

        self._build_num = build_num
        self._state = WatchState.FOUND

    async def _poll(self) -> None:
        if self._budget.exhausted:
            logger.error(
                "Build %s did not finish after %s iterations (last status: %s)",
                self._build_num,
                self._budget.used,
                self._status,
            )
            self._state = WatchState.EXHAUSTED
            return

        self._status = await self._client.get_build_status(self._build_num)
        outcome = classify_status(self._status)

        if outcome is BuildOutcome.FAILURE:
            self._build_url = await self._client.get_build_url(self._build_num)
            logger.error(
                "Go to %s to get more details on the CircleCI build failure.", self._build_url
            )
            self._state = WatchState.FAILURE
        elif outcome is BuildOutcome.SUCCESS:
            self._build_url = await self._client.get_build_url(self._build_num)
            logger.info("The build completed successfully")
            logger.info("Go to %s to check the CircleCI build details.", self._build_url)
            self._state = WatchState.SUCCESS
        else:
            await self._wait()
