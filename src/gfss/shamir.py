# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Shamir Share generation and recovery.

The secret is converted to bits, a 1 bit is prepended as a marker
(so that leading zeros survive) and the result is split into
chunks of `bits` width. Each chunk is the constant term of its own
random polynomial. A share has one y value for each chunk, all
evaluated at the x value that is the share id.
"""

import math
import logging
from typing import Set
from typing import Dict
from typing import List

from . import gf
from . import params
from . import enc_util
from . import sss_random
from . import common_types as ct
from .errors import RangeError
from .errors import FormatError
from .errors import ConsistencyError

logger = logging.getLogger(__name__)


def _init_field(bits: int) -> gf.FieldConfig:
    if bits == 0:
        return gf.init_field(params.DEFAULT_BITS)
    else:
        return gf.init_field(bits)


def _validate_share_args(
    field           : gf.FieldConfig,
    secret          : ct.Secret,
    num_shares      : int,
    threshold       : int,
    padding_multiple: int,
) -> None:
    if not secret:
        raise FormatError("secret cannot be empty.")
    elif not enc_util.is_hex(secret):
        raise FormatError("secret must consist only of hexadecimal digits.")

    max_shares = min(field.order, params.MAX_SHARES)
    if not params.MIN_SHARES <= num_shares <= max_shares:
        if num_shares > params.MAX_SHARES:
            errmsg = (
                f"The maximum number of shares is {params.MAX_SHARES} "
                f"since the maximum bit count is {params.MAX_BITS}."
            )
        elif num_shares > field.order:
            min_bits = math.ceil(math.log2(num_shares + 1))
            errmsg   = (
                f"num_shares must be in the range [{params.MIN_SHARES}, {field.order}]. "
                f"To create {num_shares} shares, specify at least {min_bits} bits."
            )
        else:
            errmsg = f"num_shares must be in the range [{params.MIN_SHARES}, {field.order}]."
        raise RangeError(errmsg)

    if not params.MIN_THRESHOLD <= threshold <= num_shares:
        errmsg = f"threshold must be in the range [{params.MIN_THRESHOLD}, {num_shares}]."
        raise RangeError(errmsg)

    if not 0 <= padding_multiple <= params.MAX_PADDING_MULTIPLE:
        errmsg = f"padding_multiple must be in the range [0, {params.MAX_PADDING_MULTIPLE}]."
        raise RangeError(errmsg)


def share(
    secret          : ct.Secret,
    num_shares      : int,
    threshold       : int,
    bits            : int = 0,
    padding_multiple: int = params.DEFAULT_PADDING_MULTIPLE,
    make_coeff      : ct.RandRanger = sss_random.randrange,
) -> List[ct.Share]:
    """Split a hex secret into num_shares, of which threshold can recover it.

    bits=0 uses the default of 8 bits. The secret is zero padded to a
    multiple of padding_multiple bits, so that short secrets do not
    leak their length (0 or 1 to disable padding).
    """
    # The field is selected before anything else is validated.
    field = _init_field(bits)
    _validate_share_args(field, secret, num_shares, threshold, padding_multiple)

    logger.debug(f"split: num_shares={num_shares} threshold={threshold} bits={field.bits}")

    marked_secret = "1" + enc_util.hex2bin(secret)
    secret_ints   = enc_util.split_bits(marked_secret, field.bits, padding_multiple)

    #        i=  0   1   2   3
    # x=1      y10 y11 y12 y13
    # x=2      y20 y21 y22 y23
    # x=3      y30 y31 y32 y33
    #
    # i=0 is the least significant chunk of the secret.
    share_ids = range(1, num_shares + 1)
    y_bits_by_x: Dict[int, List[ct.BinStr]] = {x: [] for x in share_ids}

    for secret_int in secret_ints:
        coeffs = [1 + make_coeff(field.order) for _ in range(threshold - 1)]
        coeffs.append(secret_int)
        for x in share_ids:
            y = gf.poly_eval(field, coeffs, x)
            y_bits_by_x[x].append(f"{y:0{field.bits}b}")

    shares: List[ct.Share] = []
    for x in share_ids:
        # most significant chunk first
        data_bits = "".join(reversed(y_bits_by_x[x]))
        data      = enc_util.bin2hex(data_bits)
        shares.append(enc_util.encode_share(field.bits, x, data))

    return shares


def _decode_distinct(shares: ct.Shares) -> List[ct.ShareComponents]:
    if not shares:
        raise FormatError("shares cannot be empty.")

    bits       = 0
    seen_ids   : Set[int] = set()
    components : List[ct.ShareComponents] = []
    for share_str in shares:
        component = enc_util.decode_share(share_str)
        if bits == 0:
            bits = component.bits
        elif component.bits != bits:
            raise ConsistencyError("Shares are mismatched due to different bits settings.")

        # Duplicates don't count towards the threshold.
        if component.id not in seen_ids:
            seen_ids.add(component.id)
            components.append(component)

    return components


def _interpolate_bits(components: List[ct.ShareComponents], at_x: int) -> ct.BinStr:
    field = gf.init_field(components[0].bits)
    xs    = [component.id for component in components]

    logger.debug(f"combine: distinct_shares={len(xs)} bits={field.bits} at_x={at_x}")

    # Zip the chunks of all shares, e.g. 3 shares of 5 chunks
    #
    # [ [193, 186,  29, 177, 196],
    #   [ 53, 105, 139, 127, 149],
    #   [146, 211, 249, 206,  81] ]
    #
    # become 5 columns of 3 values
    #
    # [ [193,  53, 146],
    #   [186, 105, 211],
    #   [ 29, 139, 249],
    #   [177, 127, 206],
    #   [196, 149,  81] ]
    columns: List[List[int]] = []
    for component in components:
        y_values = enc_util.split_bits(enc_util.hex2bin(component.data), field.bits)
        for i, y in enumerate(y_values):
            if i >= len(columns):
                columns.append([])
            columns[i].append(y)

    # columns[0] is the least significant chunk
    return "".join(
        f"{gf.interpolate(field, xs, column, at_x):0{field.bits}b}" for column in reversed(columns)
    )


def combine(shares: ct.Shares) -> ct.Secret:
    """Recover the secret from shares.

    If fewer shares than the threshold are given (duplicates don't
    count), the result is not the original secret. There is no way
    to detect this.
    """
    components = _decode_distinct(shares)
    result     = _interpolate_bits(components, at_x=0)

    # Drop the zero padding and the 1 bit marker that was prepended
    # in share(). If the marker is missing (not enough shares), the
    # whole value is returned.
    marker_idx = result.find("1")
    return enc_util.bin2hex(result[marker_idx + 1 :])


def new_share(share_id: int, shares: ct.Shares) -> ct.Share:
    """Generate the share for share_id from existing shares.

    If share_id is the id of one of the shares and there are at least
    threshold shares, the result is the same as that share.
    """
    if share_id <= 0:
        raise RangeError("share_id must be greater than zero.")
    elif not shares or not shares[0]:
        raise FormatError("shares cannot be empty.")

    first = enc_util.decode_share(shares[0])

    max_id = (1 << first.bits) - 1
    if share_id > max_id:
        errmsg = f"share_id must be in the range [1, {max_id}]."
        raise RangeError(errmsg)

    components = _decode_distinct(shares)
    result     = _interpolate_bits(components, at_x=share_id)

    # Aligning hex data to 4 bits may add a chunk of zeros for bit
    # widths that are not a multiple of 4. Trim to the input length.
    num_data_bits = len(first.data) * 4
    data          = enc_util.bin2hex(result[-num_data_bits:])
    return enc_util.encode_share(first.bits, share_id, data)
