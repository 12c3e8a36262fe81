# server/api/quotes.py

from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, HTTPException, Depends, Response, status
from sqlalchemy.orm import Session
from database import get_db
from api.auth import get_current_user
from models.quote import Quote


router = APIRouter(
    prefix="/api/quotes",
    tags=["quotes"],
    dependencies=[Depends(get_current_user)],
)


class QuoteIn(BaseModel):
    quote_text: str = ""
    author: str = ""


class QuoteOut(QuoteIn):
    model_config = ConfigDict(from_attributes=True)

    id: int


def _get_or_404(db: Session, quote_id: int) -> Quote:
    quote = db.get(Quote, quote_id)
    if quote is None:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.get("", response_model=list[QuoteOut])
def list_quotes(db: Session = Depends(get_db)):
    return db.query(Quote).order_by(Quote.id.asc()).all()


@router.post("", response_model=QuoteOut, status_code=status.HTTP_201_CREATED)
def create_quote(req: QuoteIn, response: Response, db: Session = Depends(get_db)):
    quote = Quote(**req.model_dump())
    db.add(quote)
    db.commit()
    db.refresh(quote)
    response.headers["Location"] = f"/api/quotes/{quote.id}"
    return quote


@router.get("/{quote_id}", response_model=QuoteOut)
def get_quote(quote_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, quote_id)


@router.put("/{quote_id}", response_model=QuoteOut)
def update_quote(quote_id: int, req: QuoteIn, db: Session = Depends(get_db)):
    quote = _get_or_404(db, quote_id)
    quote.quote_text = req.quote_text
    quote.author = req.author
    db.commit()
    db.refresh(quote)
    return quote


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quote(quote_id: int, db: Session = Depends(get_db)):
    quote = _get_or_404(db, quote_id)
    db.delete(quote)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
