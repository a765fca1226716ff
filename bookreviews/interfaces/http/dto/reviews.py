from __future__ import annotations

from pydantic import BaseModel, StrictStr


class ReviewQueryDTO(BaseModel):
    review: StrictStr


class ReviewMutationDTO(BaseModel):
    ok: bool = True
    isbn: str
    username: str
