# This file is part of the gfss project
#
# Copyright (c) 2019-2022 Manuel Barkhau (mbarkhau@gmail.com) - MIT License
# SPDX-License-Identifier: MIT
"""Bounds and defaults for share parameters.

| Parameter          | Range             | Default |
| ------------------ | ----------------- | ------- |
| `bits`             | 3..20             | 8       |
| `num_shares`       | 2..2**bits - 1    |         |
| `threshold`        | 2..num_shares     |         |
| `padding_multiple` | 0..1024           | 128     |
| `n_bytes` (random) | 1..8192           |         |

With bits=20, up to 1048575 shares can be created.
"""

import os

MIN_BITS     = 3
MAX_BITS     = 20
DEFAULT_BITS = 8

MIN_SHARES = 2
MAX_SHARES = (1 << MAX_BITS) - 1

MIN_THRESHOLD = 2

DEFAULT_PADDING_MULTIPLE = 128
MAX_PADDING_MULTIPLE     = 1024

MAX_RANDOM_BYTES = (1 << 16) // 8

# ids and data of shares are encoded as hex
RADIX = 16

# defaults for the cli
DEFAULT_THRESHOLD  = int(os.getenv('GFSS_THRESHOLD' , "3"))
DEFAULT_NUM_SHARES = int(os.getenv('GFSS_NUM_SHARES', "5"))
