#!/usr/bin/env python3
"""
Entry point for running as module: python -m buildwatch
"""

import sys
import asyncio

from buildwatch.app import main


def run() -> None:
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
