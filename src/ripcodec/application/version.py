"""print the ripcodec, python and system versions"""

from __future__ import annotations

import sys
import argparse
import platform

from ripcodec.version import location
from ripcodec.version import version


def setargs(sub: argparse.ArgumentParser) -> None:
    pass


def cmdline(cmdarg: argparse.Namespace) -> int:
    python = sys.version.replace('\n', ' ')
    system = ' '.join(platform.uname()[:5])
    sys.stdout.write(f'ripcodec : {version}\nPython   : {python}\nUname    : {system}\nFrom     : {location()}\n')
    sys.stdout.flush()
    return 0
