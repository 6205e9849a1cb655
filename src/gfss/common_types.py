# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Types used across multiple modules."""

from typing import Any
from typing import Sequence
from typing import Protocol
from typing import NamedTuple

# from typing import TypeAlias
TypeAlias = Any

# string of hex digits
HexStr: TypeAlias = str

# string of "0" and "1" characters
BinStr: TypeAlias = str

Secret: TypeAlias = HexStr

# <bits><id><data>
Share : TypeAlias = str
Shares: TypeAlias = Sequence[Share]


class ShareComponents(NamedTuple):
    bits: int
    id  : int
    data: HexStr


class RandRanger(Protocol):
    def __call__(self, stop: int) -> int:
        ...
