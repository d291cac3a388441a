"""Address collection shared by commands that accept email lists."""

from __future__ import annotations

from typing import IO


def collect_emails(args: tuple[str, ...], source: IO[str] | None) -> list[str]:
    """Merge positional addresses with one-per-line addresses from *source*.

    Positional addresses come first. Lines from *source* are stripped and
    blank lines skipped; nothing else is altered so malformed entries still
    reach validation.
    """
    emails = list(args)
    if source is not None:
        emails.extend(line.strip() for line in source if line.strip())
    return emails
