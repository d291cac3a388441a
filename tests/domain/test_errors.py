"""Tests for WorkFriendsError."""

from __future__ import annotations

import pytest

from workfriends.domain.errors import WorkFriendsError


class TestWorkFriendsError:
    def test_message(self) -> None:
        err = WorkFriendsError("No valid emails provided")
        assert err.message == "No valid emails provided"
        assert str(err) == "No valid emails provided"

    def test_lists_default_to_none(self) -> None:
        err = WorkFriendsError("boom")
        assert err.invalid_emails is None
        assert err.invalid_domains is None
        assert err.detail() == {}

    def test_empty_lists_are_not_attached(self) -> None:
        err = WorkFriendsError("boom", invalid_emails=[], invalid_domains=[])
        assert err.invalid_emails is None
        assert err.invalid_domains is None

    def test_lists_keep_order(self) -> None:
        err = WorkFriendsError("boom", invalid_emails=["b", "a"], invalid_domains=["x"])
        assert err.invalid_emails == ("b", "a")
        assert err.invalid_domains == ("x",)

    def test_detail_only_includes_present_lists(self) -> None:
        err = WorkFriendsError("boom", invalid_domains=["invalid"])
        assert err.detail() == {"invalid_domains": ["invalid"]}

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise WorkFriendsError("boom")

    def test_attributes_are_read_only(self) -> None:
        err = WorkFriendsError("boom", invalid_emails=["bad"])
        with pytest.raises(AttributeError):
            err.invalid_emails = ("other",)  # type: ignore[misc]

    def test_not_affected_by_caller_mutation(self) -> None:
        source = ["bad"]
        err = WorkFriendsError("boom", invalid_emails=source)
        source.append("worse")
        assert err.invalid_emails == ("bad",)

    def test_repr_names_lists(self) -> None:
        err = WorkFriendsError("boom", invalid_emails=["bad"])
        assert "invalid_emails=('bad',)" in repr(err)
