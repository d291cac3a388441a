"""Membership classification — do these emails belong to one organization?

Two modes:
- Known: every email domain must equal one of the caller's known domains.
- Auto: no known domains given; all emails must share exactly one domain.

Domains compare case-insensitively. Local parts are never normalized.
An empty email list is a vacuous internal meeting and classifies as True
without validating the known domains.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field

from workfriends.domain.addresses import (
    email_domain,
    is_valid_domain,
    is_valid_email,
    normalize_known_domains,
    partition,
)
from workfriends.domain.errors import WorkFriendsError

MembershipMode = Literal["empty", "known", "auto"]


class MembershipReport(BaseModel):
    """Outcome of a successful classification.

    Attributes:
        work_friends: Whether the emails belong to one organization.
        mode: ``"empty"`` for no emails, ``"known"`` when matched against
            known domains, ``"auto"`` when inferred from the emails alone.
        email_domains: Distinct lowercased email domains, first-seen order.
        known_domains: Validated known domains as supplied.
        outsiders: Emails matching no known domain (known mode only).
    """

    model_config = {"frozen": True}

    work_friends: bool
    mode: MembershipMode
    email_domains: list[str] = Field(default_factory=list)
    known_domains: list[str] = Field(default_factory=list)
    outsiders: list[str] = Field(default_factory=list)


def _validation_message(invalid_emails: list[str], invalid_domains: list[str]) -> str:
    message = "Validation failed"
    if invalid_emails:
        message += f" - {len(invalid_emails)} invalid email(s)"
    if invalid_domains:
        message += f" - {len(invalid_domains)} invalid domain(s)"
    return message


def classify_membership(
    emails: Sequence[str],
    known_domains: str | Sequence[str] | None = None,
) -> MembershipReport:
    """Classify *emails* against *known_domains* (or against each other).

    Raises:
        WorkFriendsError: If any email or known domain is malformed, or if
            no valid emails remain.
    """
    if not emails:
        return MembershipReport(work_friends=True, mode="empty")

    valid_emails, invalid_emails = partition(emails, is_valid_email)

    valid_domains: list[str] = []
    invalid_domains: list[str] = []
    if known_domains is not None:
        valid_domains, invalid_domains = partition(
            normalize_known_domains(known_domains), is_valid_domain
        )

    if invalid_emails or invalid_domains:
        raise WorkFriendsError(
            _validation_message(invalid_emails, invalid_domains),
            invalid_emails=invalid_emails,
            invalid_domains=invalid_domains,
        )

    if not valid_emails:
        msg = "No valid emails provided"
        raise WorkFriendsError(msg)

    # dict keeps first-seen order while deduplicating
    domains = list(dict.fromkeys(email_domain(email) for email in valid_emails))

    if valid_domains:
        allowed = {domain.lower() for domain in valid_domains}
        outsiders = [email for email in valid_emails if email_domain(email) not in allowed]
        return MembershipReport(
            work_friends=not outsiders,
            mode="known",
            email_domains=domains,
            known_domains=valid_domains,
            outsiders=outsiders,
        )

    return MembershipReport(
        work_friends=len(domains) == 1,
        mode="auto",
        email_domains=domains,
    )


def are_work_friends(
    emails: Sequence[str],
    known_domains: str | Sequence[str] | None = None,
) -> bool:
    """Return True if all *emails* belong to one organization.

    With *known_domains* (a single domain or a list of them), every email
    domain must match one of them. Without, all emails must share a domain.

    Examples:
        >>> are_work_friends(["bob@worktionary.com", "sue@worktionary.com"])
        True
        >>> are_work_friends(["bob@worktionary.com", "external@gmail.com"])
        False
        >>> are_work_friends(["Bob@WORKTIONARY.COM"], "worktionary.com")
        True

    Raises:
        WorkFriendsError: If any email or known domain is malformed.
    """
    return classify_membership(emails, known_domains).work_friends
