from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ClassReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Delimiter class name (paren, bracket, curly)")
    open: str
    close: str
    count: int = Field(..., description="Signed balance; > 0 excess openers, < 0 excess closers")
    removed: int = Field(..., description="Number of delimiters deleted for this class")


class BalanceReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    language: str
    original: str
    balanced: str
    changed: bool
    classes: List[ClassReport]
    removed_offsets: List[int] = Field(default_factory=list, alias="removedOffsets")
