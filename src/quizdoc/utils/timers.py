from __future__ import annotations

import logging
import time
from contextlib import contextmanager


@contextmanager
def time_block(label: str):
    start = time.perf_counter()
    try:
        yield
    finally:
        end = time.perf_counter()
        logging.info("%s took %.1f ms", label, (end - start) * 1000)
