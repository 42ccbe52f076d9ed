import logging
from itertools import zip_longest
from ..const import CARD_SPACING, CARD_WIDTH, VIEW_LOGGER_NAME
from .add_view import AddView
from .joke_card_view import JokeCardView

logger = logging.getLogger(VIEW_LOGGER_NAME)

TITLE = 'All Groan Up'

class ContentView:
    def __init__(self, store, loop) -> None:
        self.store = store
        self.loop = loop
        self.showing_add_joke = False
        self.add_view = None
        self.cards = {}
        self.jokes = store.live_query()
        self.jokes.subscribe(self.refresh)
        self.refresh()

    def refresh(self):
        joke_ids = set()
        for joke in self.jokes:
            joke_ids.add(joke.id)
            if joke.id not in self.cards:
                self.cards[joke.id] = JokeCardView(joke, self.store, self.loop)

        for joke_id in list(self.cards):
            if joke_id not in joke_ids:
                self.cards.pop(joke_id).close()
        logger.debug('Gallery showing %d cards', len(self.cards))

    @property
    def visible_cards(self) -> list:
        # Cards sent off-screen keep no position, even when their delete failed
        return [card for card in (self.cards[joke.id] for joke in self.jokes)
                if not card.is_offscreen]

    def card_at(self, position):
        return self.visible_cards[position]

    def toggle_add_joke(self):
        self.set_showing_add_joke(not self.showing_add_joke)

    def set_showing_add_joke(self, showing):
        self.showing_add_joke = showing
        if showing and self.add_view is None:
            # The store is handed to the form explicitly, it has no other way to reach it
            self.add_view = AddView(self.store, on_dismiss=lambda: self.set_showing_add_joke(False))
        elif not showing:
            self.add_view = None

    def remove_jokes(self, offsets) -> bool:
        return self.store.remove_at([card.joke for card in self.visible_cards], offsets)

    def close(self):
        for card in self.cards.values():
            card.close()
        self.cards.clear()
        self.jokes.close()

    def render(self) -> str:
        lines = [TITLE, '']

        rendered_cards = [(position, card.render())
                          for position, card in enumerate(self.visible_cards, start=1)]
        if rendered_cards:
            gap = ' ' * CARD_SPACING
            lines.append(gap.join(f'#{position}'.ljust(CARD_WIDTH)
                                  for position, _ in rendered_cards).rstrip())
            for row in zip_longest(*(card for _, card in rendered_cards), fillvalue=''):
                lines.append(gap.join(line.ljust(CARD_WIDTH) for line in row).rstrip())
        else:
            lines.append('No jokes yet')

        lines += ['', '( Add Joke )']
        if self.showing_add_joke:
            lines += [''] + self.add_view.render()
        return '\n'.join(lines)
