from uuid import uuid4
from sqlalchemy import Column, String
from .base import Base

def new_joke_id():
    return uuid4().hex

class Joke(Base):
    __tablename__ = "joke"

    id  = Column(String, primary_key=True, default=new_joke_id)
    setup = Column(String, nullable=False)
    punchline = Column(String, nullable=False)
    rating = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f'Joke(id={self.id!r}, setup={self.setup!r}, rating={self.rating!r})'
