# server/models/quote.py

from sqlalchemy import Column, Integer, String, Text
from . import Base


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)
    quote_text = Column(Text, nullable=False, default="")
    author = Column(String, nullable=False, default="")
