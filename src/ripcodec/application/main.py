"""main.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import argparse

from ripcodec.application import decode
from ripcodec.application import encode
from ripcodec.application import environ
from ripcodec.application import version

# name, module (with setargs and cmdline), help
COMMANDS = (
    ('version', version, 'report the ripcodec version'),
    ('env', environ, 'show the ripcodec configuration'),
    ('decode', decode, 'decode hexadecimal RIP packets into JSON'),
    ('encode', encode, 'encode JSON RIP packets into hexadecimal'),
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog='ripcodec', description='RIP version 1 and 2 packet encoder and decoder')
    subparsers = parser.add_subparsers()

    for name, module, text in COMMANDS:
        sub = subparsers.add_parser(name, help=text, description=module.__doc__)
        sub.set_defaults(func=module.cmdline)
        module.setargs(sub)

    cmdarg = parser.parse_args(argv)
    if not hasattr(cmdarg, 'func'):
        parser.print_help()
        environ.default()
        return 1

    result: int = cmdarg.func(cmdarg)
    return result
