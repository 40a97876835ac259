import pytest

from generate_db import generate, save_db


@pytest.fixture(scope="session")
def small_db():
    return generate(depth_limit=2)


@pytest.fixture
def db_file(tmp_path, small_db):
    path = tmp_path / "halfway.pkl"
    save_db(small_db, str(path))
    return str(path)
