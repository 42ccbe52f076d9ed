from .add_view import AddView
from .content_view import ContentView
from .emoji_view import emoji_for
from .joke_card_view import JokeCardView
