# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Random numbers for polynomial coefficients and random secrets."""

import os
import random
import warnings

from . import params
from . import enc_util
from . import common_types as ct
from .errors import RangeError

DEBUG_RANDOM_ENV = 'GFSS_DEBUG_RANDOM'


def _is_debug_random() -> bool:
    return os.getenv(DEBUG_RANDOM_ENV) == 'DANGER'


def urandom(size: int) -> bytes:
    if _is_debug_random():
        # https://xkcd.com/221/
        return b"4" * size
    else:
        return os.urandom(size)


class DebugRandom:

    _state: int

    def __init__(self) -> None:
        self._state = 4294967291

    def randrange(self, stop: int) -> int:
        self._state = (self._state + 4294967291) % (2 ** 63)
        return self._state % stop


DEBUG_WARN_MSG = "Warning, GFSS using debug random! This should only happen when debugging or testing."

_debug_rand = DebugRandom()
_rand       = random.SystemRandom()


def reset_debug_random() -> None:
    if _is_debug_random():
        _debug_rand._state = 4294967291


def randrange(stop: int) -> int:
    if _is_debug_random():
        warnings.warn(DEBUG_WARN_MSG)
        result = _debug_rand.randrange(stop)
    else:
        result = _rand.randrange(stop)
    assert isinstance(result, int)
    return result


def init_randrange() -> ct.RandRanger:
    if _is_debug_random():
        reset_debug_random()
    return randrange


def random_hex(n_bytes: int) -> ct.HexStr:
    """Generate a random hex string of n_bytes."""
    if not 1 <= n_bytes <= params.MAX_RANDOM_BYTES:
        errmsg = f"n_bytes must be in the range [1, {params.MAX_RANDOM_BYTES}]."
        raise RangeError(errmsg)

    return enc_util.bytes2hex(urandom(n_bytes))
