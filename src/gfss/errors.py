# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Exceptions for invalid arguments to share/combine."""


class SharingError(ValueError):
    pass


class RangeError(SharingError):
    """A numeric argument is outside of its valid range.

    Used for the bit width, number of shares, threshold,
    padding multiple, number of random bytes and share id.
    """


class FormatError(SharingError):
    """A secret or share string is malformed."""


class ConsistencyError(SharingError):
    """Shares that are combined were not created with the same bit width."""
