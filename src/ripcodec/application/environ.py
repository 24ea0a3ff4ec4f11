"""print the ripcodec configuration, as an INI file or as environment variables"""

from __future__ import annotations

import sys
import argparse

from ripcodec.environment import Environment
from ripcodec.environment import getenv


def setargs(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('-d', '--diff', help='only show the values which are not the default', action='store_true')
    sub.add_argument('-e', '--env', help='use the environment variable syntax', action='store_true')


def default() -> None:
    sys.stdout.write('\nEnvironment values are:\n')
    for line in Environment.default():
        sys.stdout.write(f'    {line}\n')
    sys.stdout.flush()


def cmdline(cmdarg: argparse.Namespace) -> int:
    getenv()
    lines = Environment.iter_env(cmdarg.diff) if cmdarg.env else Environment.iter_ini(cmdarg.diff)
    for line in lines:
        sys.stdout.write(f'{line}\n')
    sys.stdout.flush()
    return 0
