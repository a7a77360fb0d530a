import time

import pytest

from core.utils.time import date_to_timestamp


def _local_epoch(value: str) -> int:
    return int(time.mktime(time.strptime(value, "%Y-%m-%d %H:%M:%S")))


class TestDateToTimestamp:
    def test_converts_local_wall_clock_time(self) -> None:
        assert date_to_timestamp("2014-11-24 01:40:22") == _local_epoch("2014-11-24 01:40:22")

    def test_returns_int(self) -> None:
        assert isinstance(date_to_timestamp("2020-01-01 00:00:00"), int)

    def test_later_dates_are_larger(self) -> None:
        assert date_to_timestamp("2014-11-25 00:00:00") > date_to_timestamp("2014-11-24 23:59:59")

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert date_to_timestamp(" 2014-11-24 01:40:22 ") == _local_epoch("2014-11-24 01:40:22")

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_yield_zero(self, value) -> None:
        assert date_to_timestamp(value) == 0

    @pytest.mark.parametrize(
        "value",
        [
            "yesterday",
            "2014-11-24",
            "2014-11-24T01:40:22Z",
            "2014-13-40 99:99:99",
        ],
    )
    def test_unparsable_values_yield_zero(self, value) -> None:
        assert date_to_timestamp(value) == 0
