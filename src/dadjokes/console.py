import logging
import re
import threading
# The following import makes arrows work properly
# when writing an input
#  pylint: disable=unused-import
import readline
#  pylint: enable=unused-import
from .command import Command
from .const import CONSOLE_LOGGER_NAME
from .default_data import get_default_command_regex
from .loaded_answers import loaded_answers as la

logger = logging.getLogger(CONSOLE_LOGGER_NAME)

def read_line(loop, future, prompt):
    try:
        line = input(prompt)
    except EOFError:
        line = None
    try:
        loop.call_soon_threadsafe(_deliver_line, future, line)
    except RuntimeError:
        # The loop is closed, nobody is waiting for this line
        logger.debug('Dropped input read after the console stopped')

def _deliver_line(future, line):
    if not future.done():
        future.set_result(line)

class JokeConsole:
    #  pylint: disable=unnecessary-lambda
    command_to_handler = {
        Command.SEND_HELP:
            (lambda console, _: console.send_help()),
        Command.SHOW_JOKES:
            (lambda console, _: console.show_jokes()),
        Command.OPEN_ADD_FORM:
            (lambda console, _: console.open_add_form()),
        Command.SET_SETUP:
            (lambda console, groups: console.set_field('setup', groups[0])),
        Command.SET_PUNCHLINE:
            (lambda console, groups: console.set_field('punchline', groups[0])),
        Command.SET_RATING:
            (lambda console, groups: console.set_rating(groups[0])),
        Command.SAVE_JOKE:
            (lambda console, _: console.save_joke()),
        Command.CANCEL_ADD:
            (lambda console, _: console.cancel_add()),
        Command.TAP_CARD:
            (lambda console, groups: console.tap_card(int(groups[0]))),
        Command.DRAG_CARD:
            (lambda console, groups: console.drag_card(int(groups[0]), float(groups[1]))),
        Command.RELEASE_CARD:
            (lambda console, groups: console.release_card(int(groups[0]))),
        Command.SWIPE_CARD:
            (lambda console, groups: console.swipe_card(int(groups[0]), float(groups[1]))),
        Command.DELETE_JOKE:
            (lambda console, groups: console.delete_joke(int(groups[0]))),
        Command.SEND_EXIT:
            (lambda console, _: console.send_exit()),
    }
    #  pylint: enable=unnecessary-lambda

    def __init__(self, content_view, loop) -> None:
        self.content_view = content_view
        self.loop = loop
        self.is_running = True
        self.command_regex = dict(map(lambda x: (re.compile(x['regex'], re.I), x['command']),
                                      get_default_command_regex()))

    async def run(self):
        print(self.content_view.render())
        while self.is_running:
            line = await self.read_input()
            if line is None:
                print()
                line = 'exit'
            response = self.handle(line)
            if response:
                print(response)

    def read_input(self):
        # A daemon thread, so an interrupted prompt never keeps the program alive
        future = self.loop.create_future()
        threading.Thread(target=read_line, args=(self.loop, future, la['USER_QUERY']),
                         name='stdin-reader', daemon=True).start()
        return future

    def handle(self, line) -> str:
        logger.debug('Received command: %s', line)
        for regex, command in self.command_regex.items():
            match = regex.match(line)
            if match is not None:
                logger.debug('Selected command %s', str(command))
                return self.command_to_handler[command](self, match.groups())
        return la['MESSAGE_NOT_UNDERSTOOD']

    def _card(self, position):
        if position < 1 or position > len(self.content_view.visible_cards):
            return None
        return self.content_view.card_at(position - 1)

    def send_help(self):
        return la['AVAILABLE_COMMANDS']

    def show_jokes(self):
        return self.content_view.render()

    def open_add_form(self):
        if not self.content_view.showing_add_joke:
            self.content_view.toggle_add_joke()
        return self.content_view.render()

    def set_field(self, name, value):
        if not self.content_view.showing_add_joke:
            return la['FORM_NOT_OPEN']
        setattr(self.content_view.add_view, name, value)
        return '\n'.join(self.content_view.add_view.render())

    def set_rating(self, rating):
        if not self.content_view.showing_add_joke:
            return la['FORM_NOT_OPEN']
        add_view = self.content_view.add_view
        if not add_view.select_rating(rating):
            return la['UNKNOWN_RATING_F'].format(rating=rating, ratings=', '.join(add_view.ratings))
        return '\n'.join(add_view.render())

    def save_joke(self):
        if not self.content_view.showing_add_joke:
            return la['FORM_NOT_OPEN']
        # A rejected joke leaves the form open and says nothing
        self.content_view.add_view.submit()
        return self.content_view.render()

    def cancel_add(self):
        if self.content_view.showing_add_joke:
            self.content_view.toggle_add_joke()
        return self.content_view.render()

    def tap_card(self, position):
        card = self._card(position)
        if card is None:
            return la['NO_SUCH_CARD_F'].format(position=position)
        card.tap()
        return self.content_view.render()

    def drag_card(self, position, height):
        card = self._card(position)
        if card is None:
            return la['NO_SUCH_CARD_F'].format(position=position)
        card.drag_changed((0, height))
        return la['CARD_DRAGGED_F'].format(position=position, height=height)

    def release_card(self, position):
        card = self._card(position)
        if card is None:
            return la['NO_SUCH_CARD_F'].format(position=position)
        if card.drag_amount.height == 0:
            return la['CARD_NOT_DRAGGED_F'].format(position=position)
        card.drag_ended(card.drag_amount)
        if card.is_deleting:
            return la['CARD_DELETING_F'].format(position=position)
        return la['CARD_BACK_F'].format(position=position)

    def swipe_card(self, position, height):
        card = self._card(position)
        if card is None:
            return la['NO_SUCH_CARD_F'].format(position=position)
        card.drag_changed((0, height))
        return self.release_card(position)

    def delete_joke(self, position):
        if self._card(position) is None:
            return la['NO_SUCH_CARD_F'].format(position=position)
        self.content_view.remove_jokes([position - 1])
        return self.content_view.render()

    def send_exit(self):
        self.is_running = False
        return la['APP_FINISHED']
