import logging
import os

from contextlib import contextmanager

logging.getLogger("flake8").setLevel(logging.CRITICAL)


@contextmanager
def change_directory(new_path):
    prev_cwd = os.getcwd()
    os.chdir(new_path)
    try:
        yield
    finally:
        os.chdir(prev_cwd)


def read_filepath(fpath):
    with open(fpath, mode="r", newline="", encoding="utf-8") as fbuf:
        return fbuf.read()


def add(acc, val):
    return acc + val


class Recorder:
    """Combining function that records its calls and delegates to func."""

    def __init__(self, func=add):
        self.func = func
        self.calls = []

    def __call__(self, acc, val, index, seq):
        self.calls.append((acc, val, index, seq))
        return self.func(acc, val)

    @property
    def indices(self):
        return [c[2] for c in self.calls]
