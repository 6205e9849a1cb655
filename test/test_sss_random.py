import re

import pytest

import gfss
import gfss.shamir
import gfss.sss_random
from gfss.errors import RangeError


def test_random_hex():
    for n_bytes in [1, 2, 16, 8192]:
        hex_str = gfss.random_hex(n_bytes)
        assert len(hex_str) == n_bytes * 2
        assert re.fullmatch(r"[0-9a-f]+", hex_str)

    assert gfss.random_hex(32) != gfss.random_hex(32)


def test_random_hex_range():
    for n_bytes in [-1, 0, 8193]:
        try:
            gfss.random_hex(n_bytes)
            assert False, "expected RangeError"
        except RangeError as ex:
            assert "n_bytes must be in the range [1, 8192]" in str(ex)


def test_randrange():
    for stop in [1, 2, 7, 255, 2 ** 20 - 1]:
        for _ in range(20):
            val = gfss.sss_random.randrange(stop)
            assert 0 <= val < stop


def test_debug_random(monkeypatch):
    monkeypatch.setenv('GFSS_DEBUG_RANDOM', "DANGER")

    assert gfss.sss_random.urandom(4) == b"4444"
    assert gfss.random_hex(2) == "3434"

    with pytest.warns(UserWarning, match="debug random"):
        randrange = gfss.sss_random.init_randrange()
        shares_a  = gfss.share("deadbeef", 3, 2, make_coeff=randrange)

    with pytest.warns(UserWarning, match="debug random"):
        randrange = gfss.sss_random.init_randrange()
        shares_b  = gfss.share("deadbeef", 3, 2, make_coeff=randrange)

    assert shares_a == shares_b
    assert gfss.combine(shares_a[1:]) == "deadbeef"


def test_debug_random_disabled(monkeypatch):
    monkeypatch.delenv('GFSS_DEBUG_RANDOM', raising=False)
    assert gfss.sss_random.init_randrange() is gfss.sss_random.randrange
    assert gfss.sss_random.urandom(16) != b"4" * 16
