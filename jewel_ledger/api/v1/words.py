"""Amount-in-words endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...services.words import amount_in_words, to_words

router = APIRouter()


class WordsRequest(BaseModel):
    amount: int = Field(ge=0)


class WordsResponse(BaseModel):
    amount: int
    words: str
    amount_in_words: str


@router.post("/words", response_model=WordsResponse)
async def spell_amount(payload: WordsRequest) -> WordsResponse:
    return WordsResponse(
        amount=payload.amount,
        words=to_words(payload.amount),
        amount_in_words=amount_in_words(payload.amount),
    )
