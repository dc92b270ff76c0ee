from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


def _clean_values(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    return {
        code.strip(): (text or "")
        for code, text in values.items()
        if code and code.strip()
    }


class TranslationRecord(BaseModel):
    """Schema for a stored translation row."""

    id: Optional[Any] = None
    key: str
    namespace: str = Field(validation_alias="category")
    translations: Dict[str, str] = Field(default_factory=dict)
    created_at: Optional[str] = None

    model_config = {"populate_by_name": True}

    @field_validator("translations", mode="before")
    @classmethod
    def _none_values_to_empty(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: ("" if v is None else str(v)) for k, v in value.items()}
        return value or {}


class CreateTranslationRequest(BaseModel):
    """Schema for adding a translation key."""

    key: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Translation key",
            json_schema_extra={"example": "hero.title"},
        ),
    ]
    namespace: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Namespace (category) of the key",
            json_schema_extra={"example": "faq"},
        ),
    ]
    translations: Annotated[
        Dict[str, Optional[str]],
        Field(
            default_factory=dict,
            description="Language code to text",
            json_schema_extra={"example": {"en": "Welcome", "de": "Willkommen"}},
        ),
    ]

    @field_validator("key", "namespace")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("translations")
    @classmethod
    def _clean(cls, value: Dict[str, Optional[str]]) -> Dict[str, str]:
        return _clean_values(value)


class UpdateTranslationRequest(BaseModel):
    """Schema for replacing the texts of an existing key."""

    key: Annotated[str, Field(..., min_length=1, description="Translation key")]
    namespace: Annotated[
        Optional[str],
        Field(default=None, description="Restrict the update to one namespace"),
    ] = None
    translations: Annotated[
        Dict[str, Optional[str]],
        Field(..., description="Language code to text"),
    ]

    @field_validator("translations")
    @classmethod
    def _clean(cls, value: Dict[str, Optional[str]]) -> Dict[str, str]:
        return _clean_values(value)


class TranslationListResponse(BaseModel):
    """Schema for the admin translation list."""

    translations: List[TranslationRecord]
    namespaces: List[str]
    count: int
