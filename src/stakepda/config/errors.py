"""Errors raised while loading stakepda settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """A setting is present but malformed or out of range."""


class MissingConfigurationError(ConfigurationError):
    """One or more required environment variables are unset or blank.

    ``names`` lists every missing variable, sorted, so a single run reports
    all of them at once.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")
