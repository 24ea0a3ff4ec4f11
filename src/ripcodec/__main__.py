"""__main__.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from __future__ import annotations

import sys

from ripcodec.application.main import main

if __name__ == '__main__':
    try:
        sys.exit(main())
    except BrokenPipeError:
        # the output was piped into a command which stopped reading
        sys.exit(1)
