import logging

import pytest

from bookkeeping_client.core.logger import _BatchFilter


@pytest.fixture(autouse=True)
def _reset_logging_handlers():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if any(isinstance(f, _BatchFilter) for f in h.filters):
            root.removeHandler(h)
