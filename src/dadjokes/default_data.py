from .command import Command

def get_default_command_regex():
    return [
        {'regex': r'\s*(?:what\s+can\s+you\s+do\s*\??|help)\s*$',
            'command': Command.SEND_HELP},
        {'regex': r'\s*(?:show|list)(?:\s+(?:me\s+)?(?:the\s+)?jokes)?\s*$',
            'command': Command.SHOW_JOKES},
        {'regex': r'\s*add(?:\s+(?:a\s+)?(?:new\s+)?joke)?\s*$',
            'command': Command.OPEN_ADD_FORM},
        {'regex': r'\s*setup\s+(\S.*?)\s*$',
            'command': Command.SET_SETUP},
        {'regex': r'\s*punchline\s+(\S.*?)\s*$',
            'command': Command.SET_PUNCHLINE},
        {'regex': r'\s*rating\s+(\S+)\s*$',
            'command': Command.SET_RATING},
        {'regex': r'\s*save\s*$',
            'command': Command.SAVE_JOKE},
        {'regex': r'\s*cancel\s*$',
            'command': Command.CANCEL_ADD},
        {'regex': r'\s*tap\s+(\d+)\s*$',
            'command': Command.TAP_CARD},
        {'regex': r'\s*drag\s+(\d+)\s+(-?\d+(?:\.\d+)?)\s*$',
            'command': Command.DRAG_CARD},
        {'regex': r'\s*release\s+(\d+)\s*$',
            'command': Command.RELEASE_CARD},
        {'regex': r'\s*swipe\s+(\d+)\s+(-?\d+(?:\.\d+)?)\s*$',
            'command': Command.SWIPE_CARD},
        {'regex': r'\s*delete\s+(\d+)\s*$',
            'command': Command.DELETE_JOKE},
        {'regex': r'\s*exit\s*$',
            'command': Command.SEND_EXIT},
    ]

def get_answers():
    return [
        # General
        {'id': 'APP_FINISHED', 'text': 'Bye! Keep groaning'},
        {'id': 'USER_QUERY', 'text': '> '},
        {'id': 'MESSAGE_NOT_UNDERSTOOD', 'text':
            'Command not understood. Try \'help\''},

        # Available commands
        {'id': 'AVAILABLE_COMMANDS', 'text': '''You can do the following things
    Show this message: help
    Show the jokes: show
    Open the add form: add joke
    Fill in the form: setup <text> / punchline <text> / rating Sob|Sigh|Silence|Smirk
    Save or close the form: save / cancel
    Show or hide a punchline: tap 2
    Drag a card up or down: drag 2 -150, then release 2
    Drag and release at once: swipe 2 -250
    Delete a joke: delete 2
    End the execution: exit'''},

        # Cards
        {'id': 'NO_SUCH_CARD_F', 'text': 'There is no card #{position}'},
        {'id': 'CARD_DRAGGED_F', 'text': 'Card #{position} is dragged to {height:g}'},
        {'id': 'CARD_NOT_DRAGGED_F', 'text': 'Card #{position} is not being dragged'},
        {'id': 'CARD_DELETING_F', 'text': 'Card #{position} flies away'},
        {'id': 'CARD_BACK_F', 'text': 'Card #{position} snaps back'},

        # Add form
        {'id': 'FORM_NOT_OPEN', 'text': 'Open the form first with \'add joke\''},
        {'id': 'UNKNOWN_RATING_F', 'text': '\'{rating}\' is not a rating, use one of {ratings}'},
    ]
