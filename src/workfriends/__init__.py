"""workfriends — decide whether email addresses belong to one organization."""

from workfriends.domain.addresses import is_valid_domain, is_valid_email
from workfriends.domain.errors import WorkFriendsError
from workfriends.domain.membership import (
    MembershipReport,
    are_work_friends,
    classify_membership,
)

__version__ = "0.1.0"

__all__ = [
    "MembershipReport",
    "WorkFriendsError",
    "__version__",
    "are_work_friends",
    "classify_membership",
    "is_valid_domain",
    "is_valid_email",
]
