"""
Point the app at a throwaway sqlite database and storage directory before any
test module imports it, then create the schema once per run.
"""
import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="fitmarket-tests-")
os.environ.setdefault("DB_URL", f"sqlite:///{os.path.join(_tmp, 'test.db')}")
os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("STORAGE_ROOT", os.path.join(_tmp, "media"))
os.environ.setdefault("STORAGE_PUBLIC_URL", "http://testserver/media")
os.environ.setdefault("PURCHASE_DELAY_SECONDS", "0")

import pytest  # noqa: E402

from fitmarket.db import Base, engine  # noqa: E402
from fitmarket import models  # noqa: E402,F401

Base.metadata.create_all(engine)


@pytest.fixture(autouse=True)
def _reset_overrides():
    yield
    from fitmarket.main import app
    app.dependency_overrides.clear()
