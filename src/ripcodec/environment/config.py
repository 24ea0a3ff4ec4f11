"""config.py

Copyright (c) 2024 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import os
import sys
import configparser
from dataclasses import dataclass, field, fields
from typing import Any, Callable, ClassVar, Iterator

APPLICATION: str = 'ripcodec'

# data_files are installed relative to the prefix, RIPCODEC_ROOT overrides it
ROOT: str = os.environ.get('RIPCODEC_ROOT', sys.prefix)
ENVFILE: str = os.path.join(ROOT, 'etc', APPLICATION, f'{APPLICATION}.env')

LEVELS: tuple[str, ...] = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


def read_boolean(value: str) -> bool:
    lowered = value.lower()
    if lowered in ('1', 'true', 'yes', 'on', 'enable'):
        return True
    if lowered in ('0', 'false', 'no', 'off', 'disable'):
        return False
    raise ValueError(f'not a boolean: {value}')


def read_level(value: str) -> str:
    upper = value.upper()
    if upper not in LEVELS:
        raise ValueError(f'not a log level: {value}')
    return upper


def read_destination(value: str) -> str:
    if value in ('stdout', 'stderr'):
        return value
    if value.startswith('file:') and len(value) > len('file:'):
        return value
    raise ValueError(f'not a log destination: {value}')


def setting(default: Any, help: str, reader: Callable[[str], Any]) -> Any:
    return field(default=default, metadata={'help': help, 'reader': reader})


@dataclass
class LogSection:
    enable: bool = setting(True, 'enable logging', read_boolean)
    level: str = setting('INFO', 'lowest level reported (CRITICAL, ERROR, WARNING, INFO or DEBUG)', read_level)
    destination: str = setting('stderr', 'stdout, stderr or file:<path>', read_destination)
    all: bool = setting(False, 'report everything', read_boolean)
    packets: bool = setting(False, 'hex dump the packets decoded and encoded', read_boolean)
    parser: bool = setting(False, 'report decoding decisions', read_boolean)
    serializer: bool = setting(False, 'report encoding decisions', read_boolean)
    short: bool = setting(True, 'do not prefix lines with time, pid and level', read_boolean)


@dataclass
class DebugSection:
    traceback: bool = setting(False, 'print the python traceback of failed packets', read_boolean)


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class Environment:
    """Process wide configuration, see setup() for where the values come from."""

    _instance: ClassVar[Environment | None] = None
    _loaded: ClassVar[bool] = False

    log: LogSection
    debug: DebugSection

    def __new__(cls) -> Environment:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.log = LogSection()
            cls._instance.debug = DebugSection()
        return cls._instance

    def sections(self) -> dict[str, Any]:
        return {'log': self.log, 'debug': self.debug}

    @classmethod
    def settings(cls) -> Iterator[tuple[str, str, Any, Any]]:
        """Yield (section, option, current value, dataclass field) for every option."""
        for name, section in cls().sections().items():
            for option in fields(section):
                yield name, option.name, getattr(section, option.name), option

    @classmethod
    def setup(cls, envfile: str | None = None) -> None:
        """Read the configuration once, the first value found wins:

        - the environment variable ripcodec.<section>.<option>
        - the environment variable ripcodec_<section>_<option>
        - the option in the [ripcodec.<section>] section of the INI file
        - the default
        """
        if cls._loaded:
            return
        cls._loaded = True

        ini = configparser.ConfigParser(interpolation=None)
        ini.read(ENVFILE if envfile is None else envfile)

        env = cls()
        for name, option, _, definition in cls.settings():
            dotted = f'{APPLICATION}.{name}.{option}'
            value = os.environ.get(dotted, os.environ.get(dotted.replace('.', '_')))
            if value is None:
                value = ini.get(f'{APPLICATION}.{name}', option, fallback=None)
            if value is None:
                continue
            try:
                setattr(env.sections()[name], option, definition.metadata['reader'](value.strip().strip('\'"')))
            except ValueError as exc:
                raise ValueError(f'invalid value for {name}.{option} : {value} ({exc})') from None

    @classmethod
    def reset(cls) -> None:
        env = cls()
        env.log = LogSection()
        env.debug = DebugSection()
        cls._loaded = False

    @classmethod
    def default(cls) -> Iterator[str]:
        for name, option, _, definition in cls.settings():
            described = definition.metadata['help']
            yield f'{APPLICATION}.{name}.{option:<12} {described}, default ({_text(definition.default)})'

    @classmethod
    def iter_ini(cls, diff: bool = False) -> Iterator[str]:
        current = ''
        for name, option, value, definition in cls.settings():
            if diff and value == definition.default:
                continue
            if name != current:
                current = name
                yield f'[{APPLICATION}.{name}]'
            yield f'{option} = {_text(value)}'

    @classmethod
    def iter_env(cls, diff: bool = False) -> Iterator[str]:
        for name, option, value, definition in cls.settings():
            if diff and value == definition.default:
                continue
            yield f'{APPLICATION}.{name}.{option}={_text(value)}'
