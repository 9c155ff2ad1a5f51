"""Request bodies accepted by the API."""

import re
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
)
from pydantic.alias_generators import to_camel

from cookease.domain.users import normalize_email

_USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

AccountEmail = Annotated[EmailStr, AfterValidator(normalize_email)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(BaseModel):
    username: str = Field(min_length=3, max_length=30, pattern=_USERNAME_PATTERN)
    email: AccountEmail
    password: str = Field(min_length=6)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("password")
    @classmethod
    def _strong_password(cls, value: str) -> str:
        if not (
            re.search(r"[a-z]", value)
            and re.search(r"[A-Z]", value)
            and re.search(r"\d", value)
        ):
            raise ValueError(
                "Password must contain at least one lowercase letter, "
                "one uppercase letter, and one number"
            )
        return value


class LoginRequest(BaseModel):
    email: AccountEmail
    password: str = Field(min_length=1)


class UpdateProfileRequest(BaseModel):
    username: str | None = Field(default=None, min_length=3, max_length=30)
    password: str | None = Field(default=None, min_length=6)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class AddToCartRequest(_CamelModel):
    ingredient_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)
    unit: str = Field(min_length=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1)


class RecipeIngredientBody(BaseModel):
    id: str
    name: str
    quantity: str


class RecipeCreateRequest(_CamelModel):
    title: str = Field(min_length=1)
    image: str
    description: str
    country: str = Field(min_length=1)
    main_ingredient: str = Field(min_length=1)
    allergens: list[str] = Field(default_factory=list)
    cook_time: str
    rating: float = Field(ge=0, le=5)
    ingredients: list[RecipeIngredientBody] = Field(default_factory=list)
    instructions: str
    nutrition: dict[str, str] = Field(default_factory=dict)


class RecipeUpdateRequest(_CamelModel):
    title: str | None = Field(default=None, min_length=1)
    image: str | None = None
    description: str | None = None
    country: str | None = Field(default=None, min_length=1)
    main_ingredient: str | None = Field(default=None, min_length=1)
    allergens: list[str] | None = None
    cook_time: str | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    ingredients: list[RecipeIngredientBody] | None = None
    instructions: str | None = None
    nutrition: dict[str, str] | None = None
