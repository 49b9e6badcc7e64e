import datetime
import json

import pytest

from foldseq.sparse import HOLE, SparseArray

from . import Recorder


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def holey():
    """[1, <hole>, 3]"""
    return SparseArray([1, HOLE, 3])


@pytest.fixture
def fake_timestamp():
    """2021 Apr 1, 12:00 AM"""
    return datetime.datetime(2021, 4, 1, tzinfo=datetime.timezone.utc)


@pytest.fixture
def patch_datetime_now(monkeypatch, fake_timestamp):
    """Patch the datetime.datetime.now function.

    Important note: Callers **must** match the usage exactly:
    ```
      import datetime
      datetime.datetime.now()
    ```
    """

    class mydatetime:
        @classmethod
        def now(cls, *args, **kwargs):
            return fake_timestamp

    monkeypatch.setattr(datetime, "datetime", mydatetime)


@pytest.fixture
def filepath_csv(tmp_path):
    tmp_filepath = tmp_path.joinpath("t.csv")
    return tmp_filepath


@pytest.fixture
def filepath_png(tmp_path):
    tmp_filepath = tmp_path.joinpath("t.png")
    return tmp_filepath


@pytest.fixture
def amounts_csv(tmp_path):
    """CSV with a blank cell in the amount column."""
    tmp_filepath = tmp_path.joinpath("amounts.csv")
    tmp_filepath.write_text("name,amount\na,1\nb,\nc,3\n", encoding="utf-8")
    return tmp_filepath


@pytest.fixture
def values_json(tmp_path):
    tmp_filepath = tmp_path.joinpath("values.json")
    tmp_filepath.write_text(json.dumps([1, 2, 3, 4]), encoding="utf-8")
    return tmp_filepath
