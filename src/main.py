#!/usr/bin/env python3

import asyncio
import json
import logging
from sqlalchemy.exc import DatabaseError
from dadjokes.console import JokeConsole
from dadjokes.const import APP_LOG_FILE, DB_CONFIG_FILE, DEFAULT_LOG_FILE, \
    APP_LOGGER_NAME, STARTUP_LOGGER_NAME, TRACEBACK_LOGGER_NAME
from dadjokes.database import Database
from dadjokes.exceptions import InitFailedException
from dadjokes.store import JokeStore
from dadjokes.views import ContentView

logger = logging.getLogger(APP_LOGGER_NAME)
traceback_logger = logger.getChild(TRACEBACK_LOGGER_NAME)
startup_logger = logging.getLogger(STARTUP_LOGGER_NAME)

def configure_logging():
    # Configure library loggers
    file_log_level = logging.DEBUG
    logging.basicConfig(filename=DEFAULT_LOG_FILE,
                            filemode='a',
                            format='%(asctime)s,%(msecs)d %(name)s %(levelname)s %(message)s',
                            datefmt='%H:%M:%S',
                            level=file_log_level)

    # Configure app loggers
    logger.handlers.clear()
    startup_logger.handlers.clear()

    # App logs go to a separate file
    file_handler = logging.FileHandler(APP_LOG_FILE)
    file_handler.setLevel(file_log_level)
    formatter = logging.Formatter('%(asctime)s,%(msecs)d %(name)s %(levelname)s %(message)s')
    formatter.datefmt = '%H:%M:%S'
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Only startup errors reach the console, failed commits stay in the log files
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.ERROR)
    startup_logger.addHandler(stream_handler)

async def run_app(database):
    loop = asyncio.get_running_loop()
    store = JokeStore(database)
    content_view = ContentView(store, loop)
    try:
        await JokeConsole(content_view, loop).run()
    finally:
        content_view.close()

def main():
    configure_logging()

    database = Database()
    try:
        logger.debug('Connecting to the database')
        database.initialize_connection()
    except (json.decoder.JSONDecodeError, KeyError):
        startup_logger.error('File with the database configuration (%s) does not have the appropriate \
formatting (see the sample file)', DB_CONFIG_FILE)
        traceback_logger.error('', exc_info=True)
        return
    except (DatabaseError, InitFailedException):
        startup_logger.error('There was an error while connecting to the database')
        traceback_logger.error('', exc_info=True)
        return

    try:
        logger.debug('Starting the gallery')
        asyncio.run(run_app(database))
    except KeyboardInterrupt:
        print()
    except DatabaseError:
        startup_logger.error('There was an error while reading the database')
        traceback_logger.error('', exc_info=True)
    finally:
        logger.debug('Stopping execution')
        database.dispose()

if __name__=='__main__':
    main()
