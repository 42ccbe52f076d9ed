from enum import Enum, auto

class Command(Enum):
    SEND_HELP = auto()
    SHOW_JOKES = auto()
    OPEN_ADD_FORM = auto()
    SET_SETUP = auto()
    SET_PUNCHLINE = auto()
    SET_RATING = auto()
    SAVE_JOKE = auto()
    CANCEL_ADD = auto()
    TAP_CARD = auto()
    DRAG_CARD = auto()
    RELEASE_CARD = auto()
    SWIPE_CARD = auto()
    DELETE_JOKE = auto()
    SEND_EXIT = auto()
