"""Release-tool errors.

Each one is a :class:`click.ClickException`, so the CLI prints the message
and exits with status 1.  HTTP failures that do not map to one of these are
re-raised as :class:`requests.HTTPError`.
"""

from __future__ import annotations

import click


class ReleaseError(click.ClickException):
    """Base for user-facing release failures."""


class InvalidTagError(ReleaseError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"invalid version tag {tag!r}: expected vMAJOR.MINOR.PATCH")
        self.tag = tag


class TagExistsError(ReleaseError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"tag {tag!r} already exists")
        self.tag = tag


class ReleaseExistsError(ReleaseError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"release {tag!r} already exists")
        self.tag = tag


class ReleaseNotFoundError(ReleaseError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"could not find release {tag!r}")
        self.tag = tag
