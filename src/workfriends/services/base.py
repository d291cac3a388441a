"""BaseService — foundation for workfriends services.

Every service receives the resolved :class:`WorkFriendsSettings` at
construction time so it can fall back to configured organization domains.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from workfriends.config.settings import WorkFriendsSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class MembershipService(BaseService):
            def check(self, emails: list[str]) -> ServiceResult:
                domains = self._settings.organization.known_domains
                ...
    """

    def __init__(self, settings: WorkFriendsSettings) -> None:
        self._settings = settings
