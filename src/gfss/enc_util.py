# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Helper functions related to data/share encoding/decoding.

Shares are encoded as a single string:

    <bits><id><data>

| Part   | Size                    | Encoding                                 |
| ------ | ----------------------- | ---------------------------------------- |
| `bits` | 1 char                  | base 36 digit, 3-9 and A-K (or a-k)      |
| `id`   | len(hex(2**bits - 1))   | hex, zero padded                         |
| `data` | 1+ chars                | hex                                      |

For bits=8, the id is two hex digits, for bits=20 it is five.
"""

import re
import base64
from typing import List

from . import params
from . import common_types as ct
from .errors import RangeError
from .errors import FormatError

BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

NYBBLES = tuple(f"{n:04b}" for n in range(16))

HEX_RE = re.compile(r"[0-9A-Fa-f]+")

_SHARE_PATTERN_TMPL = r"([3-9A-Ka-k])([0-9A-Fa-f]{{{id_len}}})([0-9A-Fa-f]+)"


def bytes2hex(data: bytes) -> ct.HexStr:
    """Convert bytes to a hex string."""
    return base64.b16encode(data).decode('ascii').lower()


def hex2bytes(hex_str: ct.HexStr) -> bytes:
    """Convert a hex string to bytes."""
    hex_str = hex_str.upper().zfill(2 * ((len(hex_str) + 1) // 2))
    return base64.b16decode(hex_str.encode('ascii'))


def is_hex(text: str) -> bool:
    return HEX_RE.fullmatch(text) is not None


def base36_value(char: str) -> int:
    """Parse a single (case insensitive) base 36 digit."""
    if len(char) == 1 and char.upper() in BASE36_DIGITS:
        return BASE36_DIGITS.index(char.upper())
    else:
        raise FormatError(f"Invalid base 36 digit '{char}'")


def base36_char(val: int) -> str:
    return BASE36_DIGITS[val]


def hex2bin(hex_str: ct.HexStr) -> ct.BinStr:
    """Convert a hex string to a string of bits, 4 per hex digit."""
    return "".join(NYBBLES[int(char, params.RADIX)] for char in hex_str)


def pad_left(bin_str: ct.BinStr, multiple: int) -> ct.BinStr:
    """Left pad with zeros so the length is a multiple of `multiple`."""
    if multiple == 1:
        return bin_str
    elif not 2 <= multiple <= params.MAX_PADDING_MULTIPLE:
        errmsg = f"multiple must be in the range [2, {params.MAX_PADDING_MULTIPLE}]."
        raise RangeError(errmsg)

    extra = len(bin_str) % multiple
    if extra > 0:
        return bin_str.zfill(len(bin_str) + multiple - extra)
    else:
        return bin_str


def bin2hex(bin_str: ct.BinStr) -> ct.HexStr:
    """Convert a string of bits to a hex string.

    The bits are left padded to a multiple of 4 first.
    """
    bin_str = pad_left(bin_str, 4)
    nybbles = (bin_str[i : i + 4] for i in range(0, len(bin_str), 4))
    return "".join(f"{int(nybble, 2):x}" for nybble in nybbles)


def split_bits(bin_str: ct.BinStr, bits: int, padding_multiple: int = 0) -> List[int]:
    """Split a string of bits into integers of `bits` width.

    Chunks are taken from the end of the string, so the least
    significant chunk comes first. The last chunk of the result
    (the front of the string) may be shorter than `bits`.
    """
    if padding_multiple > 0:
        bin_str = pad_left(bin_str, padding_multiple)

    parts: List[int] = []
    end = len(bin_str)
    while end > bits:
        parts.append(int(bin_str[end - bits : end], 2))
        end -= bits
    parts.append(int(bin_str[:end], 2))
    return parts


def _id_len(bits: int) -> int:
    max_id = (1 << bits) - 1
    return len(f"{max_id:x}")


def encode_share(bits: int, share_id: int, data: ct.HexStr) -> ct.Share:
    if not params.MIN_BITS <= bits <= params.MAX_BITS:
        errmsg = f"bits must be in the range [{params.MIN_BITS}, {params.MAX_BITS}]."
        raise RangeError(errmsg)

    max_id = (1 << bits) - 1
    if not 1 <= share_id <= max_id:
        errmsg = f"share_id must be in the range [1, {max_id}]."
        raise RangeError(errmsg)

    hex_id = f"{share_id:x}".zfill(_id_len(bits))
    return base36_char(bits) + hex_id + data


def decode_share(share: ct.Share) -> ct.ShareComponents:
    if not share:
        raise FormatError("Malformed share, share is empty.")

    # The first character determines the length of all other parts.
    bits = base36_value(share[0])
    if not params.MIN_BITS <= bits <= params.MAX_BITS:
        errmsg = (
            f"Unexpected {bits}-bit share outside of the range [{params.MIN_BITS}, {params.MAX_BITS}]."
        )
        raise FormatError(errmsg)

    share_re = re.compile(_SHARE_PATTERN_TMPL.format(id_len=_id_len(bits)))
    match    = share_re.fullmatch(share)
    if match is None:
        raise FormatError(f"Malformed share for bits={bits}")

    _, hex_id, data = match.groups()
    share_id = int(hex_id, params.RADIX)

    # NOTE: at x=0 the polynomial evaluates to the secret, no valid
    #   share is ever created for it.
    if share_id == 0:
        raise RangeError("Invalid share with id=0. Possible attack.")

    # For bits=3 the single id digit can go up to f, beyond 2**3 - 1.
    max_id = (1 << bits) - 1
    if share_id > max_id:
        errmsg = f"share_id must be in the range [1, {max_id}]."
        raise RangeError(errmsg)

    return ct.ShareComponents(bits, share_id, data)
