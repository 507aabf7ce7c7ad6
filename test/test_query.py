"""
Tests for list query filters.
"""

from twiliokit.endpoints.calls import CallStatus
from twiliokit.query import ListQuery


class TestListQuery:
    def test_empty(self) -> None:
        assert ListQuery().params == []

    def test_builders_return_new_queries(self) -> None:
        base = ListQuery().with_to("+15551234567")

        narrowed = base.with_status(CallStatus.BUSY)

        assert base.params == [("To", "+15551234567")]
        assert narrowed.params == [("To", "+15551234567"), ("Status", "busy")]

    def test_call_filters(self) -> None:
        query = (
            ListQuery()
            .with_from("+15557654321")
            .with_parent_call_sid("CA123")
            .with_start_time("2024-01-15")
            .with_end_time("2024-01-16")
        )

        assert query.params == [
            ("From", "+15557654321"),
            ("ParentCallSid", "CA123"),
            ("StartTime", "2024-01-15"),
            ("EndTime", "2024-01-16"),
        ]

    def test_conference_filters(self) -> None:
        query = (
            ListQuery()
            .with_friendly_name("survey-room")
            .with_date_created("2024-01-15")
            .with_date_updated("2024-01-16")
            .with_page_size(5)
        )

        assert query.params == [
            ("FriendlyName", "survey-room"),
            ("DateCreated", "2024-01-15"),
            ("DateUpdated", "2024-01-16"),
            ("PageSize", "5"),
        ]

    def test_boolean_filters(self) -> None:
        assert ListQuery().with_muted(True).with_hold(False).params == [
            ("Muted", "true"),
            ("Hold", "false"),
        ]

    def test_queries_are_hashable(self) -> None:
        assert ListQuery().with_page_size(5) == ListQuery().with_page_size(5)
        assert hash(ListQuery().with_page_size(5)) == hash(ListQuery().with_page_size(5))
