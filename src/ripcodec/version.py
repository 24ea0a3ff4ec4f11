"""version.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

if sys.version_info < (3, 12):
    sys.exit('ripcodec requires python 3.12 or later')


def location() -> str:
    return os.path.dirname(os.path.abspath(__file__))


def _installed() -> str:
    try:
        return distribution_version('ripcodec')
    except PackageNotFoundError:
        # running from a source checkout
        return '1.0.0'


version: str = os.environ.get('ripcodec_version', _installed())
