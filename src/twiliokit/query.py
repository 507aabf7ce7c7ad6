"""Query filters for list endpoints."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from twiliokit.endpoints.base import FormItems, encode_value


@dataclass(frozen=True)
class ListQuery:
    """Immutable builder of list filters.

    Each ``with_*`` method returns a new query. Only one page is ever
    requested; ``PageSize`` is an ordinary filter here.
    """

    items: tuple[tuple[str, str], ...] = ()

    def _add(self, key: str, value: Any) -> ListQuery:
        return replace(self, items=self.items + ((key, encode_value(value)),))

    @property
    def params(self) -> FormItems:
        return list(self.items)

    def with_page_size(self, page_size: int) -> ListQuery:
        return self._add("PageSize", page_size)

    def with_friendly_name(self, friendly_name: str) -> ListQuery:
        return self._add("FriendlyName", friendly_name)

    def with_status(self, status: Any) -> ListQuery:
        return self._add("Status", status)

    def with_to(self, to: str) -> ListQuery:
        return self._add("To", to)

    def with_from(self, from_: str) -> ListQuery:
        return self._add("From", from_)

    def with_parent_call_sid(self, parent_call_sid: str) -> ListQuery:
        return self._add("ParentCallSid", parent_call_sid)

    def with_start_time(self, start_time: str) -> ListQuery:
        """Only calls that started on this date (``YYYY-MM-DD`` in UTC)."""
        return self._add("StartTime", start_time)

    def with_end_time(self, end_time: str) -> ListQuery:
        return self._add("EndTime", end_time)

    def with_date_created(self, date_created: str) -> ListQuery:
        return self._add("DateCreated", date_created)

    def with_date_updated(self, date_updated: str) -> ListQuery:
        return self._add("DateUpdated", date_updated)

    def with_muted(self, muted: bool) -> ListQuery:
        return self._add("Muted", muted)

    def with_hold(self, hold: bool) -> ListQuery:
        return self._add("Hold", hold)
