from .base import Base
from .database import Database
from .joke import Joke
