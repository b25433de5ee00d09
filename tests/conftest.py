import os
from collections.abc import Generator

import pytest

from tinymysql import Database


def _mysql_env() -> dict | None:
    hostname = os.environ.get("DB_HOSTNAME")
    username = os.environ.get("DB_USERNAME")
    database = os.environ.get("DB_DATABASE")
    if not hostname or not username or not database:
        return None
    return {
        "hostname": hostname,
        "username": username,
        "password": os.environ.get("DB_PASSWORD", ""),
        "database": database,
        "port": int(os.environ.get("DB_PORT", "3306")),
    }


@pytest.fixture(scope="session")
def mysql_options() -> dict:
    """Connection options for a live MySQL server; skips when DB_* env is missing."""
    opts = _mysql_env()
    if opts is None:
        pytest.skip("Missing database connection environment variables")
    return opts


@pytest.fixture(scope="module")
def db(mysql_options: dict) -> Generator[Database, None, None]:
    with Database(mysql_options) as database:
        yield database
