# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""GFSS: Galois Field Secret Sharing.

A cli app and library to split and recombine secrets, using
Shamir Secret Sharing over binary Galois Fields GF(2^n).
"""

__version__ = "2024.1001-beta"

from .errors import RangeError
from .errors import FormatError
from .errors import SharingError
from .errors import ConsistencyError
from .shamir import share
from .shamir import combine
from .shamir import new_share
from .enc_util import bytes2hex
from .enc_util import hex2bytes
from .sss_random import random_hex

__all__ = [
    'share',
    'combine',
    'new_share',
    'random_hex',
    'hex2bytes',
    'bytes2hex',
    'SharingError',
    'RangeError',
    'FormatError',
    'ConsistencyError',
]
