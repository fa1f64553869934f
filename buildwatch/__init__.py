"""
Wait for the CircleCI build of a GitLab pipeline commit.
"""

__version__ = "1.0.0"
