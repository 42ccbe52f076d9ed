import logging
import random
import textwrap
from typing import NamedTuple
from ..const import CARD_WIDTH, DELETE_DELAY_SECONDS, DELETE_DRAG_THRESHOLD, \
    IMAGE_COUNT, OFFSCREEN_OFFSET, VIEW_LOGGER_NAME
from .emoji_view import emoji_for

logger = logging.getLogger(VIEW_LOGGER_NAME)

class Offset(NamedTuple):
    width: float = 0
    height: float = 0

ZERO_OFFSET = Offset()

def blur(text) -> str:
    return ''.join(char if char.isspace() else '░' for char in text)

class JokeCardView:
    def __init__(self, joke, store, loop, image_number=None) -> None:
        self.joke = joke
        self.store = store
        self.loop = loop
        self.showing_punchline = False
        self.image_number = image_number if image_number is not None \
            else random.randint(1, IMAGE_COUNT)
        self.drag_amount = ZERO_OFFSET
        self.pending_delete = None

    @property
    def is_deleting(self) -> bool:
        return self.pending_delete is not None

    @property
    def is_offscreen(self) -> bool:
        return self.drag_amount.height <= OFFSCREEN_OFFSET

    def tap(self):
        self.showing_punchline = not self.showing_punchline
        logger.debug('Card %s punchline %s', self.joke.id,
            'revealed' if self.showing_punchline else 'hidden')

    def drag_changed(self, translation):
        if self.is_deleting:
            return
        self.drag_amount = Offset(*translation)

    def drag_ended(self, translation):
        if self.is_deleting:
            return
        self.drag_amount = Offset(*translation)

        if self.drag_amount.height < DELETE_DRAG_THRESHOLD:
            logger.debug('Card %s dragged away, deleting in %.1fs',
                self.joke.id, DELETE_DELAY_SECONDS)
            self.drag_amount = Offset(0, OFFSCREEN_OFFSET)
            self.pending_delete = self.loop.call_later(DELETE_DELAY_SECONDS, self._delete_joke)
        else:
            self.drag_amount = ZERO_OFFSET

    def _delete_joke(self):
        self.pending_delete = None
        self.store.remove(self.joke)

    def close(self):
        if self.pending_delete is not None:
            logger.debug('Cancelling pending delete of card %s', self.joke.id)
            self.pending_delete.cancel()
            self.pending_delete = None

    def render(self) -> list:
        inner_width = CARD_WIDTH - 4
        punchline = self.joke.punchline if self.showing_punchline else blur(self.joke.punchline)

        body = [f'[ Dad{self.image_number} ]'.center(inner_width), '']
        body += textwrap.wrap(self.joke.setup, inner_width) or ['']
        body.append('')
        body += textwrap.wrap(punchline, inner_width) or ['']

        lines = ['╭' + '─' * (CARD_WIDTH - 2) + '╮']
        lines += [f'│ {line.center(inner_width)} │' for line in body]
        lines.append('╰' + '─' * (CARD_WIDTH - 2) + '╯')
        lines.append(emoji_for(self.joke.rating).center(CARD_WIDTH - 1))
        return lines
