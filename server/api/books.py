# server/api/books.py

from datetime import date
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, HTTPException, Depends, Response, status
from sqlalchemy.orm import Session
from database import get_db
from api.auth import get_current_user
from models.book import Book


# -------------------------------
# Router & Schemas
# -------------------------------

# every route requires a valid bearer token
router = APIRouter(
    prefix="/api/books",
    tags=["books"],
    dependencies=[Depends(get_current_user)],
)


class BookIn(BaseModel):
    title: str = ""
    author: str = ""
    genre: str = ""
    publication_date: date | None = None


class BookOut(BookIn):
    model_config = ConfigDict(from_attributes=True)

    id: int


def _get_or_404(db: Session, book_id: int) -> Book:
    book = db.get(Book, book_id)
    if book is None:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


# -------------------------------
# Book Endpoints
# -------------------------------

@router.get("", response_model=list[BookOut])
def list_books(db: Session = Depends(get_db)):
    return db.query(Book).order_by(Book.id.asc()).all()


@router.post("", response_model=BookOut, status_code=status.HTTP_201_CREATED)
def create_book(req: BookIn, response: Response, db: Session = Depends(get_db)):
    book = Book(**req.model_dump())
    db.add(book)
    db.commit()
    db.refresh(book)
    response.headers["Location"] = f"/api/books/{book.id}"
    return book


@router.get("/{book_id}", response_model=BookOut)
def get_book(book_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, book_id)


@router.put("/{book_id}", response_model=BookOut)
def update_book(book_id: int, req: BookIn, db: Session = Depends(get_db)):
    """
    Replaces every field of the book with the request body.
    """
    book = _get_or_404(db, book_id)
    for field, value in req.model_dump().items():
        setattr(book, field, value)
    db.commit()
    db.refresh(book)
    return book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, db: Session = Depends(get_db)):
    book = _get_or_404(db, book_id)
    db.delete(book)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
