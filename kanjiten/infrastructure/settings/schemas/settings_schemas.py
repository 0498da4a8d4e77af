"""Pydantic schemas for user settings API request/response validation."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserSettings(BaseModel):
    """Schema for the resolved settings of a user (every field populated)."""

    model_config = ConfigDict(populate_by_name=True)

    display_name: str = Field(..., alias="profileName", description="Display name")
    max_level: int = Field(..., alias="maxLevel", description="Highest level to study")
    level_filter: str = Field(..., alias="jlptLevel", description="JLPT level filter")
    max_interval: int = Field(..., alias="maxInterval", description="Longest review interval")
    show_progress: bool = Field(..., alias="showProgress")
    show_drawing: bool = Field(..., alias="showDrawing")
    show_study_progress: bool = Field(..., alias="showStudyProgress")
    question_mode: str = Field(..., alias="defaultQuestionMode", description="Question order")
    dark_mode: bool = Field(..., alias="darkMode")
    language: str = Field(..., description="Interface language (en or ja)")


class UserSettingsResponse(BaseModel):
    """Schema for reading user settings."""

    success: bool = Field(..., description="Whether the request was successful")
    settings: UserSettings = Field(..., description="Resolved settings")


class UserSettingsUpdateRequest(BaseModel):
    """
    Schema for a partial settings update.

    Only the fields present in the body are saved; an explicit null clears the
    stored value so the default applies again.
    """

    display_name: str | None = Field(
        None, validation_alias=AliasChoices("profileName", "profile_name", "displayName")
    )
    max_level: int | None = Field(None, validation_alias=AliasChoices("maxLevel", "max_level"))
    level_filter: str | None = Field(
        None, validation_alias=AliasChoices("jlptLevel", "jlpt_level", "levelFilter")
    )
    max_interval: int | None = Field(
        None, validation_alias=AliasChoices("maxInterval", "max_interval")
    )
    show_progress: bool | None = Field(
        None, validation_alias=AliasChoices("showProgress", "show_progress")
    )
    show_drawing: bool | None = Field(
        None, validation_alias=AliasChoices("showDrawing", "show_drawing")
    )
    show_study_progress: bool | None = Field(
        None, validation_alias=AliasChoices("showStudyProgress", "show_study_progress")
    )
    question_mode: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "defaultQuestionMode", "default_question_mode", "questionMode"
        ),
    )
    dark_mode: bool | None = Field(None, validation_alias=AliasChoices("darkMode", "dark_mode"))
    language: str | None = Field(None, description="Interface language (en or ja)")


class LanguageResponse(BaseModel):
    """Schema for the interface language of a user."""

    success: bool = Field(..., description="Whether the request was successful")
    language: str = Field(..., description="Interface language (en or ja)")


class LanguageUpdateRequest(BaseModel):
    """Schema for changing the interface language."""

    language: str | None = Field(None, description="Interface language (en or ja)")
