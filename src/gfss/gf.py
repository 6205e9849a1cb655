# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT

"""Galois Field GF(2^n) arithmetic using log/exp lookup tables.

Elements of the field are plain integers in the range [0, 2^n).
Addition (and subtraction) is XOR, multiplication is done with
lookup tables, which are generated from a primitive polynomial
for each bit width.

A helpful introduction to Galois Fields:
https://crypto.stackexchange.com/a/2718
"""

import logging
import functools
from typing import Tuple
from typing import Sequence
from typing import NamedTuple

from . import params
from .errors import RangeError

logger = logging.getLogger(__name__)


# These are the coefficients of primitive polynomials for GF(2^n)
# with 2 <= n <= 20. The index corresponds to n. Only the lower
# terms are given, the x^n term is implicit.
#
# For example n=8: 29 = 0b11101 -> x^8 + x^4 + x^3 + x^2 + 1

PRIMITIVE_POLYNOMIALS: Tuple[int, ...] = (
    -1, -1, 1, 3, 3, 5, 3, 3, 29, 17, 9, 5, 83, 27, 43, 3, 45, 9, 39, 39, 9,
)


class FieldConfig(NamedTuple):

    bits : int
    size : int  # 2 ** bits
    order: int  # size - 1, aka. the max share id
    exp  : Tuple[int, ...]
    log  : Tuple[int, ...]


def build_field(bits: int) -> FieldConfig:
    """Generate the exp/log tables for GF(2^bits).

    The generator is x (aka. 2). Since the polynomial is primitive,
    successive powers of x step through every nonzero element exactly
    once before they wrap around to 1 again.
    """
    if not params.MIN_BITS <= bits <= params.MAX_BITS:
        errmsg = f"bits must be in the range [{params.MIN_BITS}, {params.MAX_BITS}]."
        raise RangeError(errmsg)

    size      = 1 << bits
    order     = size - 1
    primitive = PRIMITIVE_POLYNOMIALS[bits]

    exp = [0] * order
    log = [0] * size

    x = 1
    for i in range(order):
        exp[i] = x
        log[x] = i
        x      = x << 1
        if x >= size:
            x = (x ^ primitive) & order

    assert x == 1, "polynomial is not primitive"

    logger.debug(f"built GF(2^{bits}) tables")
    return FieldConfig(bits, size, order, tuple(exp), tuple(log))


@functools.lru_cache(maxsize=None)
def init_field(bits: int) -> FieldConfig:
    # A FieldConfig is never mutated, so a single instance per
    # bit width can be shared by all callers and threads.
    return build_field(bits)


def mul(field: FieldConfig, a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    else:
        return field.exp[(field.log[a] + field.log[b]) % field.order]


def poly_eval(field: FieldConfig, coeffs: Sequence[int], at_x: int) -> int:
    """Evaluate polynomial at x using Horner's Method.

    Coefficients are ordered by descending powers of x, so the last
    coefficient is the constant term (i.e. the secret).
    """
    if at_x == 0:
        return coeffs[-1] if coeffs else 0

    exp   = field.exp
    log   = field.log
    order = field.order
    log_x = log[at_x]

    # fx * x = exp(log(fx) + log(x)) is undefined for fx == 0,
    # in which case fx * x + coeff == coeff
    fx = 0
    for coeff in coeffs:
        if fx == 0:
            fx = coeff
        else:
            fx = exp[(log_x + log[fx]) % order] ^ coeff
    return fx


def interpolate(field: FieldConfig, xs: Sequence[int], ys: Sequence[int], at_x: int) -> int:
    """Evaluate the Lagrange polynomial through the points (xs, ys) at x.

    The x values must be distinct. If there are fewer ys than xs,
    the missing points contribute nothing.

    Products and quotients are calculated as sums and differences
    of logarithms. Since subtraction and addition are both XOR,
    each basis polynomial is

        y_i * Π (at_x ^ x_j) / (x_i ^ x_j)     for j != i
    """
    exp   = field.exp
    log   = field.log
    order = field.order

    accu = 0
    for i, y_i in enumerate(ys):
        if y_i == 0:
            continue

        x_i    = xs[i]
        others = tuple(xs[:i]) + tuple(xs[i + 1 :])

        if at_x in others:
            # at_x is the node of another point, for which the basis
            # polynomial of this point is zero.
            continue

        log_term = log[y_i]
        for x_j in others:
            # + order so the intermediate value is never negative
            log_term = (log_term + log[at_x ^ x_j] - log[x_i ^ x_j] + order) % order

        accu ^= exp[log_term]

    return accu
