"""
CircleCI build status classification.
"""

from enum import Enum


class BuildOutcome(str, Enum):
    """Local bucket for a CircleCI build status."""

    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"


# Statuses that fail the invoking pipeline
FAILED_STATUSES = frozenset({"canceled", "infrastructure_fail", "timedout", "failed"})

# Statuses that pass the invoking pipeline
SUCCESS_STATUSES = frozenset({"fixed", "success"})

# Everything else keeps us waiting, e.g. "retried", "not_run", "running",
# "queued", "scheduled", "not_running", "no_tests".


def classify_status(status: str | None) -> BuildOutcome:
    """Map a raw CircleCI status to success, failure or pending."""
    if status in FAILED_STATUSES:
        return BuildOutcome.FAILURE
    if status in SUCCESS_STATUSES:
        return BuildOutcome.SUCCESS
    return BuildOutcome.PENDING
