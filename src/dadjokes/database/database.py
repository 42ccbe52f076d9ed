import json
import logging
from pathlib import Path
from sqlalchemy import create_engine
from sqlalchemy.exc import DatabaseError
from sqlalchemy.orm import Session
from ..const import DB_CONFIG_FILE, DEFAULT_DATABASE_FILE, DATABASE_LOGGER_NAME
from ..exceptions import InitFailedException
from .base import Base
# Registers the joke table in the metadata
from .joke import Joke #  pylint: disable=unused-import

logger = logging.getLogger(DATABASE_LOGGER_NAME)

def get_connection_url(config_file=DB_CONFIG_FILE):
    try:
        with open(config_file, 'r', encoding='utf-8') as db_config_file:
            db_config = json.load(db_config_file)
        database_file = db_config['DATABASE_FILE']
    except FileNotFoundError:
        logger.debug('No database configuration found (%s), using defaults', config_file)
        database_file = DEFAULT_DATABASE_FILE
    return f'sqlite:///{Path(database_file).expanduser()}'

class Database:
    def __init__(self) -> None:
        self.engine = None
        self.base = Base

    def initialize_connection(self, connection_url=None):
        if connection_url is None:
            connection_url = get_connection_url()

        logger.debug('Opening database %s', connection_url)
        self.engine = create_engine(connection_url, future=True)
        try:
            self.base.metadata.create_all(self.engine, checkfirst=True)
        except DatabaseError as error:
            raise InitFailedException(f'Could not create the schema in {connection_url}') \
                from error

    def get_new_session(self):
        if self.engine is None:
            raise InitFailedException('The database connection was not initialized')
        # Jokes handed to the views outlive the session that loaded them
        return Session(self.engine, expire_on_commit=False)

    def dispose(self):
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
