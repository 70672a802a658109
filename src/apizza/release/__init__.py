"""Release tooling: zipapp packaging and GitHub release publishing."""

from apizza.release.errors import (
    InvalidTagError,
    ReleaseError,
    ReleaseExistsError,
    ReleaseNotFoundError,
    TagExistsError,
)
from apizza.release.github import GitHubClient

__all__ = [
    "GitHubClient",
    "InvalidTagError",
    "ReleaseError",
    "ReleaseExistsError",
    "ReleaseNotFoundError",
    "TagExistsError",
]
