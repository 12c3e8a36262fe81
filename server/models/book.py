# server/models/book.py

from sqlalchemy import Column, Integer, String, Date
from . import Base


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, default="")
    author = Column(String, nullable=False, default="")
    genre = Column(String, nullable=False, default="")
    publication_date = Column(Date, nullable=True)
