"""WorkFriendsError — the single failure raised by membership classification."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class WorkFriendsError(ValueError):
    """Raised when supplied emails or known domains fail structural validation.

    The offending inputs are attached in their original order so callers can
    report exactly which values were malformed. ``invalid_emails`` and
    ``invalid_domains`` are ``None`` when nothing of that kind failed.

    Attributes are read-only after construction.
    """

    def __init__(
        self,
        message: str,
        *,
        invalid_emails: Sequence[str] | None = None,
        invalid_domains: Sequence[str] | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._invalid_emails = tuple(invalid_emails) if invalid_emails else None
        self._invalid_domains = tuple(invalid_domains) if invalid_domains else None

    @property
    def message(self) -> str:
        return self._message

    @property
    def invalid_emails(self) -> tuple[str, ...] | None:
        return self._invalid_emails

    @property
    def invalid_domains(self) -> tuple[str, ...] | None:
        return self._invalid_domains

    def detail(self) -> dict[str, Any]:
        """Return the attached lists keyed by name, omitting absent ones."""
        detail: dict[str, Any] = {}
        if self._invalid_emails:
            detail["invalid_emails"] = list(self._invalid_emails)
        if self._invalid_domains:
            detail["invalid_domains"] = list(self._invalid_domains)
        return detail

    def __repr__(self) -> str:
        return (
            f"WorkFriendsError({self._message!r}, "
            f"invalid_emails={self._invalid_emails!r}, "
            f"invalid_domains={self._invalid_domains!r})"
        )
