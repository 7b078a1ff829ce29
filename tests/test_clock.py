import time

from dining.clock import msleep, now


def test_now_is_milliseconds_since_epoch():
    before = time.time() * 1000
    value = now()
    after = time.time() * 1000
    assert before - 1 <= value <= after + 1


def test_now_does_not_go_backwards():
    first = now()
    second = now()
    assert second >= first


def test_msleep_waits_at_least_requested_time():
    start = now()
    msleep(20)
    assert now() - start >= 20


def test_msleep_zero_returns_quickly():
    start = now()
    msleep(0)
    assert now() - start < 50


def test_msleep_negative_returns_quickly():
    start = now()
    msleep(-10)
    assert now() - start < 50