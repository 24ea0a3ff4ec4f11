"""__init__.py

RIP version 1 and 2 wire format (RFC 1058, RFC 2453).

Copyright (c) 2009-2017 Exa Networks. All rights reserved.
License: 3-clause BSD. (See the COPYRIGHT file)
"""
