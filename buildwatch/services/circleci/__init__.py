# CircleCI services - CircleCI API integration
from .client import CircleCIClient
from .schemas import BuildDetail, BuildSummary

__all__ = ["CircleCIClient", "BuildDetail", "BuildSummary"]
