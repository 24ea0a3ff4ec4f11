"""__init__.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

from ripcodec.environment.config import APPLICATION
from ripcodec.environment.config import ENVFILE
from ripcodec.environment.config import Environment

__all__ = [
    'APPLICATION',
    'ENVFILE',
    'Environment',
    'getenv',
]


def getenv() -> Environment:
    """Return the configuration, reading it on first use."""
    Environment.setup()
    return Environment()
