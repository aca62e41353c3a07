import math

import pytest

from passshield.analyzers.crack_time import (
    CrackTimeEstimator,
    entropy_to_seconds,
    format_time,
    parse_time,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "instant"),
        (0.5, "instant"),
        (1, "1 seconds"),
        (59, "59 seconds"),
        (60, "1 minutes"),
        (90, "2 minutes"),
        (3600, "1 hours"),
        (86400, "1 days"),
        (31557600, "1 years"),
        (3155760000, "centuries"),
        (math.inf, "centuries"),
    ],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_parse_time():
    assert parse_time("instant") == 0
    assert parse_time("centuries") == math.inf
    assert parse_time("3 days") == 3 * 86400
    with pytest.raises(ValueError):
        parse_time("soon")
    with pytest.raises(ValueError):
        parse_time("3 fortnights")


def test_entropy_to_seconds():
    assert entropy_to_seconds(11, 1) == 1024
    assert entropy_to_seconds(2000, 1e10) == math.inf


def test_zero_entropy():
    crack = CrackTimeEstimator.estimate(0)
    assert crack.offline_fast_hashing_1e10_per_second == "instant"
    assert crack.online_throttling_100_per_hour == "18 seconds"


def test_slower_attackers_take_longer():
    for entropy in (0, 10, 28, 40, 64, 128, 5000):
        crack = CrackTimeEstimator.estimate(entropy)
        times = [
            parse_time(crack.offline_fast_hashing_1e10_per_second),
            parse_time(crack.offline_slow_hashing_1e4_per_second),
            parse_time(crack.online_no_throttling_10_per_second),
            parse_time(crack.online_throttling_100_per_hour),
        ]
        assert times == sorted(times)


def test_crack_time_keeps_snake_case_keys():
    dumped = CrackTimeEstimator.estimate(40).model_dump(by_alias=True)
    assert set(dumped) == {
        "offline_slow_hashing_1e4_per_second",
        "offline_fast_hashing_1e10_per_second",
        "online_throttling_100_per_hour",
        "online_no_throttling_10_per_second",
    }
