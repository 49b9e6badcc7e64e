import logging

from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

_log = logging.getLogger(__name__)


@contextmanager
def timer(msg, level=logging.DEBUG):
    """Log how long the block took. Yields an object whose ms attribute is set on exit."""
    elapsed = SimpleNamespace(ms=None)
    start = datetime.now(tz=timezone.utc)
    try:
        yield elapsed
    finally:
        elapsed.ms = (datetime.now(tz=timezone.utc) - start) / timedelta(milliseconds=1)
        _log.log(level, f"{msg} took {elapsed.ms}ms")
