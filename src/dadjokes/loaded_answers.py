import logging
from .const import CONSOLE_LOGGER_NAME
from .default_data import get_answers

logger = logging.getLogger(CONSOLE_LOGGER_NAME)

class LoadedAnswers:
    def __init__(self) -> None:
        self._answers = dict()

    def load_answers(self, answers=None):
        for answer in answers if answers is not None else get_answers():
            self._answers[answer['id']] = answer['text']

    def __getitem__(self, key):
        if key in self._answers:
            return self._answers[key]
        logger.error('Key of answer not found: %s', key)
        return 'SAMPLE TEXT'

loaded_answers = LoadedAnswers()
loaded_answers.load_answers()
