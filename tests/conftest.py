"""pytest configuration shared by every test.

The logger and the environment are process wide singletons, the
command line tests configure them, so both are restored after each test.
"""

from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_globals() -> Iterator[None]:
    from ripcodec.environment import Environment
    from ripcodec.logger import log

    logger, enabled = log.logger, dict(log.enabled)

    yield

    log.logger, log.enabled = logger, enabled
    Environment.reset()
