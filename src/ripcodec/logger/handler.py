"""handler.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import os
import logging
import logging.config
from typing import Any

NAME: str = 'ripcodec'

SHORT: str = '%(source)-10s %(message)s'
LONG: str = '%(asctime)s %(process)-6d %(levelname)-8s %(source)-10s %(message)s'

ROTATE_SIZE: int = 1 << 20
ROTATE_KEEP: int = 3


def _handler(destination: str) -> dict[str, Any]:
    if destination in ('stdout', 'stderr'):
        return {'class': 'logging.StreamHandler', 'stream': f'ext://sys.{destination}'}
    return {
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': os.path.abspath(destination.removeprefix('file:')),
        'maxBytes': ROTATE_SIZE,
        'backupCount': ROTATE_KEEP,
    }


def configure(destination: str, level: str, short: bool) -> logging.Logger:
    """(Re)configure the ripcodec logger through logging.config.dictConfig.

    destination is stdout, stderr or file:<path>, calling it again replaces
    the previous handler.
    """
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                NAME: {'format': SHORT if short else LONG, 'datefmt': '%H:%M:%S'},
            },
            'handlers': {
                NAME: {**_handler(destination), 'formatter': NAME},
            },
            'loggers': {
                NAME: {'level': level, 'handlers': [NAME], 'propagate': False},
            },
        }
    )
    return logging.getLogger(NAME)
