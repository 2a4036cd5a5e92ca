"""Shared response models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ShopInformation(BaseModel):
    name: str
    description: str
    contact_email: str
    sections: List[str]
