"""Search I/O models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .products import ProductRead


class UserSearchResult(BaseModel):
    id: int
    username: str
    account_type: str
    profile_image: Optional[str] = None


class SearchResults(BaseModel):
    query: str
    products: List[ProductRead]
    users: List[UserSearchResult]
