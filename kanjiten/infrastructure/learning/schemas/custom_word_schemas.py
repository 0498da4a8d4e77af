"""Pydantic schemas for custom word API request/response validation."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from kanjiten.infrastructure.common.schemas import CamelModel


class CustomWordCreateRequest(BaseModel):
    """Schema for adding a custom word to a kanji."""

    kanji_id: int = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("kanjiId", "kanji_id"),
        description="ID of the kanji",
    )
    word: str = Field(..., min_length=1, max_length=100, description="The word")
    reading: str | None = Field(None, max_length=500, description="Reading of the word")
    meaning: str | None = Field(None, max_length=500, description="Meaning of the word")
    word_type: str | None = Field(
        None,
        max_length=50,
        validation_alias=AliasChoices("wordType", "word_type"),
        description="Part of speech",
    )
    jlpt_level: str | None = Field(
        None,
        max_length=20,
        validation_alias=AliasChoices("jlptLevel", "jlpt_level"),
        description="JLPT level label",
    )


class CustomWord(CamelModel):
    """Schema for a stored custom word."""

    id: int
    kanji_id: int
    word: str
    reading: str | None
    meaning: str | None
    word_type: str | None
    jlpt_level: str | None
    created_at: datetime | None


class CustomWordsListResponse(BaseModel):
    """Schema for list of custom words response."""

    success: bool = Field(..., description="Whether the request was successful")
    words: list[CustomWord] = Field(..., description="Custom words, oldest first")


class CustomWordCreateResponse(BaseModel):
    """Schema for custom word creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    word: CustomWord = Field(..., description="Created custom word")


class CustomWordDeleteResponse(BaseModel):
    """Schema for custom word deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
