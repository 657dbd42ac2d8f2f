from datetime import datetime, timezone

import pytest

from apps.api.utils.date_helper import add_months


@pytest.mark.parametrize("start, months, expected", [
    (datetime(2024, 1, 15), 1, datetime(2024, 2, 15)),
    (datetime(2024, 1, 31), 1, datetime(2024, 2, 29)),
    (datetime(2023, 1, 31), 1, datetime(2023, 2, 28)),
    (datetime(2024, 2, 29), 12, datetime(2025, 2, 28)),
    (datetime(2024, 11, 30), 3, datetime(2025, 2, 28)),
    (datetime(2024, 12, 10), 1, datetime(2025, 1, 10)),
])
def test_add_months(start, months, expected):
    assert add_months(start, months) == expected


def test_add_months_keeps_time_and_tz():
    start = datetime(2024, 3, 31, 13, 45, 10, tzinfo=timezone.utc)
    result = add_months(start, 1)
    assert result == datetime(2024, 4, 30, 13, 45, 10, tzinfo=timezone.utc)
    assert result.tzinfo is timezone.utc
