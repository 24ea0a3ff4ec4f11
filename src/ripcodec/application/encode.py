"""encode RIP packets described in JSON, printing their hexadecimal wire format"""

from __future__ import annotations

import sys
import json
import argparse
import traceback
from typing import Any

from ripcodec.application import common
from ripcodec.logger import log
from ripcodec.logger import lazyexc
from ripcodec.rip.json import packet_from_json
from ripcodec.rip.serializer import serialize

USAGE = """\
usage: ripcodec encode '{"command": "response", "version": 2, "entries": [...]}'
       ripcodec decode <hex> | ripcodec encode
"""


def setargs(sub: argparse.ArgumentParser) -> None:
    common.setargs(sub)
    sub.add_argument('-s', '--spaced', help='separate every byte with a space', action='store_true')
    sub.add_argument('packet', help='JSON packet or list of packets (default: stdin)', nargs='?')


def documents(text: str) -> list[Any]:
    """One JSON document, a JSON list of them, or one document per line as decode prints them."""
    text = text.strip()
    try:
        loaded = json.loads(text)
    except json.JSONDecodeError:
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    return loaded if isinstance(loaded, list) else [loaded]


def cmdline(cmdarg: argparse.Namespace) -> int:
    if cmdarg.packet is not None:
        text = cmdarg.packet
    elif sys.stdin.isatty():
        sys.stdout.write(USAGE)
        return 1
    else:
        text = sys.stdin.read()

    env = common.configure(cmdarg)

    try:
        packets = documents(text)
    except ValueError as exc:
        sys.stdout.write(f'invalid JSON: {exc}\n')
        return 1

    failures = 0
    for packet in packets:
        try:
            data = serialize(packet_from_json(packet))
        except (ValueError, TypeError) as exc:
            log.error(lazyexc('could not encode', exc), 'cli')
            sys.stdout.write(f'invalid packet: {exc}\n')
            if env.debug.traceback:
                traceback.print_exc()
            failures += 1
            continue
        sys.stdout.write((data.hex(' ') if cmdarg.spaced else data.hex()).upper() + '\n')

    sys.stdout.flush()
    return 1 if failures else 0
