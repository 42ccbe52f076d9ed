import logging
from ..const import DEFAULT_RATING, RATINGS, VIEW_LOGGER_NAME

logger = logging.getLogger(VIEW_LOGGER_NAME)

class AddView:
    ratings = RATINGS

    def __init__(self, store, on_dismiss=None) -> None:
        self.store = store
        self.on_dismiss = on_dismiss
        self.setup = ''
        self.punchline = ''
        self.rating = DEFAULT_RATING

    def select_rating(self, rating) -> bool:
        matches = [choice for choice in self.ratings if choice.lower() == rating.strip().lower()]
        if not matches:
            logger.debug('Ignoring unknown rating %r', rating)
            return False
        self.rating = matches[0]
        return True

    def submit(self) -> bool:
        if self.setup == '' or self.punchline == '' or self.rating == '':
            return False

        if not self.store.add(self.setup, self.punchline, self.rating):
            return False

        self.dismiss()
        return True

    def dismiss(self):
        if self.on_dismiss is not None:
            self.on_dismiss()

    def render(self) -> list:
        return [
            'Add New Joke',
            f'  Setup:     {self.setup}',
            f'  Punchline: {self.punchline}',
            '  Rating:    ' + ' '.join(f'({choice})' if choice == self.rating else choice
                                       for choice in self.ratings),
            '  [ Add A New Joke ]',
        ]
