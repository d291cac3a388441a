"""MembershipService — organization membership checks as ServiceResults.

Validation failures never escape as exceptions: a WorkFriendsError from the
domain layer becomes ``ServiceResult(ok=False)`` with the offending inputs
in ``error.detail``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from workfriends.domain.addresses import email_domain, is_valid_email, partition
from workfriends.domain.errors import WorkFriendsError
from workfriends.domain.membership import classify_membership
from workfriends.services.base import BaseService
from workfriends.services.result import ServiceResult

logger = logging.getLogger(__name__)


class MembershipService(BaseService):
    """Check whether email addresses belong to one organization."""

    def check(
        self,
        emails: Sequence[str],
        known_domains: str | Sequence[str] | None = None,
    ) -> ServiceResult:
        """Classify *emails*, falling back to configured known domains.

        Explicit *known_domains* (even an empty list) take priority over
        ``[organization] known_domains`` from the config.
        """
        op = "check"
        source = "argument"
        if known_domains is None:
            configured = self._settings.organization.known_domains
            if configured:
                known_domains = configured
                source = "config"
            else:
                source = "none"

        logger.debug("Checking %d email(s) with domain source %s", len(emails), source)
        try:
            report = classify_membership(emails, known_domains)
        except WorkFriendsError as exc:
            logger.debug("Membership check rejected input: %s", exc.message)
            code = "VALIDATION_FAILED" if exc.detail() else "NO_VALID_EMAILS"
            return ServiceResult.failure(
                op, code, exc.message, detail=exc.detail(), meta={"domain_source": source}
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "work_friends": report.work_friends,
                "mode": report.mode,
                "count": len(emails),
                "email_domains": report.email_domains,
                "known_domains": report.known_domains,
                "outsiders": report.outsiders,
            },
            meta={"domain_source": source},
        )

    def validate(self, emails: Sequence[str]) -> ServiceResult:
        """Report the structural validity of each address in *emails*."""
        op = "validate"
        valid, invalid = partition(emails, is_valid_email)
        rejected = set(invalid)
        items = [
            {
                "email": email,
                "valid": email not in rejected,
                "domain": None if email in rejected else email_domain(email),
            }
            for email in emails
        ]
        logger.debug("Validated %d email(s): %d invalid", len(emails), len(invalid))

        if invalid:
            return ServiceResult.failure(
                op,
                "INVALID_EMAILS",
                f"{len(invalid)} invalid email(s)",
                detail={"invalid_emails": invalid, "items": items},
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": items,
                "valid_count": len(valid),
                "invalid_count": 0,
            },
        )
