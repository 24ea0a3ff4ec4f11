"""decode hexadecimal RIP packets, printing one JSON document per packet"""

from __future__ import annotations

import sys
import json
import argparse
import traceback

from ripcodec.application import common
from ripcodec.logger import log
from ripcodec.logger import lazyexc
from ripcodec.rip.error import RIPError
from ripcodec.rip.json import packet_to_json
from ripcodec.rip.parser import parse
from ripcodec.util import string_is_hex

USAGE = """\
usage: ripcodec decode <hex>
       ripcodec decode < file-with-one-packet-per-line

the packet is written in hexadecimal, spaces, colons and a 0x prefix are ignored
"""


def setargs(sub: argparse.ArgumentParser) -> None:
    common.setargs(sub)
    sub.add_argument('-i', '--indent', help='indent the JSON output', action='store_true')
    sub.add_argument('payload', help='RIP packet in hexadecimal (default: one per line on stdin)', nargs='?')


def normalise(payload: str) -> str:
    data = ''.join(payload.split()).replace(':', '')
    return data[2:] if data[:2].lower() == '0x' else data


def cmdline(cmdarg: argparse.Namespace) -> int:
    if cmdarg.payload is not None:
        payloads = [cmdarg.payload]
    elif sys.stdin.isatty():
        sys.stdout.write(USAGE)
        return 1
    else:
        payloads = [line.strip() for line in sys.stdin if line.strip()]

    env = common.configure(cmdarg)
    indent = 2 if cmdarg.indent else None

    failures = 0
    for payload in payloads:
        data = normalise(payload)
        if not string_is_hex(data):
            sys.stdout.write(f'invalid hexadecimal: {payload[:50]}\n')
            failures += 1
            continue
        try:
            packet = parse(bytes.fromhex(data))
        except RIPError as exc:
            log.error(lazyexc('could not decode', exc), 'cli')
            sys.stdout.write(f'invalid payload: {exc}\n')
            if env.debug.traceback:
                traceback.print_exc()
            failures += 1
            continue
        sys.stdout.write(json.dumps(packet_to_json(packet), indent=indent) + '\n')

    sys.stdout.flush()
    return 1 if failures else 0
