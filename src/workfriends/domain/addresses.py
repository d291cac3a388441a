"""Structural rules for email addresses and organization domains.

Both validators are total: they never raise and always return a bool.

INVARIANT: ``is_valid_domain`` is looser than the domain part of
``is_valid_email``. A known domain only needs a dot and more than one
character; an email domain needs two or more non-empty dot segments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence


def is_valid_email(email: str) -> bool:
    """Check that *email* is ``local@domain`` with a dotted domain.

    Examples:
        >>> is_valid_email("user.name@domain.co.uk")
        True
        >>> is_valid_email("user@domain")
        False
        >>> is_valid_email("user@@domain.com")
        False
    """
    parts = email.split("@")
    if len(parts) != 2:
        return False

    local_part, domain = parts
    if not local_part or not domain:
        return False

    labels = domain.split(".")
    if len(labels) < 2:
        return False
    return all(labels)


def is_valid_domain(domain: str) -> bool:
    """Check that a known organization domain contains a dot.

    Examples:
        >>> is_valid_domain("worktionary.com")
        True
        >>> is_valid_domain("invalid")
        False
        >>> is_valid_domain(".com")
        True
    """
    return "." in domain and len(domain) > 1


def email_domain(email: str) -> str:
    """Return the lowercased domain of an already-validated email."""
    return email.split("@")[1].lower()


def normalize_known_domains(known_domains: str | Sequence[str]) -> list[str]:
    """Wrap a lone domain string into a list; copy any other sequence."""
    if isinstance(known_domains, str):
        return [known_domains]
    return list(known_domains)


def partition(
    items: Iterable[str], predicate: Callable[[str], bool]
) -> tuple[list[str], list[str]]:
    """Split *items* into ``(passing, failing)``, keeping input order in both."""
    passing: list[str] = []
    failing: list[str] = []
    for item in items:
        (passing if predicate(item) else failing).append(item)
    return passing, failing
