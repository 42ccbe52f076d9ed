"""Shared fixtures: a throwaway SQLite database, a store on top of it and an event loop."""

import asyncio

import pytest

from dadjokes.database import Database
from dadjokes.store import JokeStore


@pytest.fixture
def database(tmp_path):
    db = Database()
    db.initialize_connection(f"sqlite:///{tmp_path / 'jokes.sqlite3'}")
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    return JokeStore(database)


@pytest.fixture
def loop():
    event_loop = asyncio.new_event_loop()
    yield event_loop
    event_loop.close()


@pytest.fixture
def run_loop(loop):
    """Let the loop fire its timers for the given number of seconds."""

    def run(seconds):
        loop.run_until_complete(asyncio.sleep(seconds))

    return run
