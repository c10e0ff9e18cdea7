from datetime import datetime

import pytest

from periodlib import config

FIXED_NOW = datetime(2024, 3, 13, 15, 30, 45)  # a Wednesday


@pytest.fixture(autouse=True)
def pinned_clock():
    """Pin the library clock so relative factories are deterministic."""
    config.set_clock(lambda: FIXED_NOW)
    yield FIXED_NOW
    config.reset_defaults()
