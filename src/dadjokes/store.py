import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import delete, func, select
from .const import STORE_LOGGER_NAME, TRACEBACK_LOGGER_NAME
from .database import Joke

logger = logging.getLogger(STORE_LOGGER_NAME)
traceback_logger = logger.getChild(TRACEBACK_LOGGER_NAME)

class JokeStore:
    def __init__(self, database) -> None:
        self.database = database
        self._subscribers = []

    def subscribe(self, callback):
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _notify(self):
        # Copy, a callback may unsubscribe while being notified
        for callback in list(self._subscribers):
            callback()

    def query(self) -> list:
        stmt = select(Joke).order_by(Joke.setup.asc(), Joke.id.asc())
        with self.database.get_new_session() as session:
            return list(session.execute(stmt).scalars())

    def live_query(self):
        return LiveJokes(self)

    def count(self) -> int:
        with self.database.get_new_session() as session:
            return session.execute(select(func.count()).select_from(Joke)).scalar_one()

    def add(self, setup, punchline, rating) -> bool:
        if setup == '' or punchline == '' or rating == '':
            logger.debug('Rejected joke with an empty field')
            return False

        with self.database.get_new_session() as session:
            joke = Joke(setup=setup, punchline=punchline, rating=rating)
            session.add(joke)
            try:
                session.commit()
            except SQLAlchemyError as error:
                session.rollback()
                logger.error('Whoops! Could not save the joke: %s', str(error))
                traceback_logger.error('', exc_info=True)
                return False

        logger.debug('Saved %r', joke)
        self._notify()
        return True

    def remove(self, joke) -> bool:
        return self._remove_ids([joke.id])

    def remove_at(self, jokes, offsets) -> bool:
        return self._remove_ids([jokes[index].id for index in offsets])

    def _remove_ids(self, joke_ids) -> bool:
        if not joke_ids:
            return False

        with self.database.get_new_session() as session:
            try:
                result = session.execute(delete(Joke).where(Joke.id.in_(joke_ids)))
                session.commit()
            except SQLAlchemyError as error:
                session.rollback()
                logger.error('Whoops! Could not delete the jokes: %s', str(error))
                traceback_logger.error('', exc_info=True)
                return False

        if result.rowcount == 0:
            logger.debug('Jokes %s were already deleted', joke_ids)
            return False
        logger.debug('Deleted %d jokes', result.rowcount)
        self._notify()
        return True

class LiveJokes:
    """Query result that refreshes itself whenever the store changes."""

    def __init__(self, store) -> None:
        self.store = store
        self._subscribers = []
        self._jokes = store.query()
        store.subscribe(self.refresh)

    def refresh(self):
        self._jokes = self.store.query()
        for callback in list(self._subscribers):
            callback()

    def subscribe(self, callback):
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def close(self):
        self.store.unsubscribe(self.refresh)
        self._subscribers.clear()

    def __len__(self):
        return len(self._jokes)

    def __iter__(self):
        return iter(self._jokes)

    def __getitem__(self, index):
        return self._jokes[index]
