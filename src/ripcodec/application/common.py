"""common.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import argparse

from ripcodec.environment import Environment
from ripcodec.environment import getenv
from ripcodec.logger import log


def setargs(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('-d', '--debug', help='log everything at debug level', action='store_true')
    sub.add_argument('-t', '--traceback', help='show the python traceback of failures', action='store_true')


def configure(cmdarg: argparse.Namespace) -> Environment:
    """Load the configuration, apply the command line overrides and start logging."""
    env = getenv()
    if cmdarg.debug:
        env.log.all = True
        env.log.level = 'DEBUG'
    if cmdarg.traceback:
        env.debug.traceback = True
    log.init(env)
    return env
