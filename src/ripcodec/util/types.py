"""types.py

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""

from typing import TYPE_CHECKING

# the decoders accept bytes, bytearray and memoryview alike (PEP 688)
if TYPE_CHECKING:
    Buffer = bytes | bytearray | memoryview
else:
    from collections.abc import Buffer

__all__ = ['Buffer']
