"""
Data schemas for CircleCI v1.1 build payloads.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BuildSummary:
    """One entry of the recent builds listing."""

    build_num: int
    vcs_revision: str
    status: str | None = None
    build_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildSummary":
        """Create a summary from a listing entry."""
        return cls(
            build_num=int(data["build_num"]),
            vcs_revision=str(data.get("vcs_revision") or ""),
            status=data.get("status"),
            build_url=data.get("build_url"),
        )


@dataclass(frozen=True)
class BuildDetail:
    """Single build record returned by the detail endpoint."""

    build_num: int
    status: str
    build_url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any], build_num: int) -> "BuildDetail":
        """Create a detail record, falling back to the requested build number."""
        return cls(
            build_num=int(data.get("build_num") or build_num),
            status=str(data["status"]),
            build_url=str(data.get("build_url") or ""),
        )
