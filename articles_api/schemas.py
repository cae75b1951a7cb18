from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiModel(BaseModel):
    """Wire models: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Article ---

class ArticleBase(ApiModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=500)
    content: str = Field(min_length=1)
    tags: str = Field("", max_length=500)  # comma-separated
    author: str = Field(min_length=1, max_length=100)
    is_published: bool = False
    newspaper_id: int | None = None


class ArticleCreate(ArticleBase):
    pass


class ArticleUpdate(ArticleBase):
    """PUT payload: every mutable field is replaced."""


class ArticleResponse(ApiModel):
    id: int
    title: str
    description: str = ""
    content: str = ""
    tags: str = ""
    author: str = ""
    created_at: datetime
    updated_at: datetime | None = None
    is_published: bool = False
    view_count: int = 0
    newspaper_id: int | None = None
    newspaper_name: str | None = None


# --- Newspaper ---

class NewspaperBase(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=1000)
    publisher: str = Field(min_length=1, max_length=200)
    website: str = Field("", max_length=500)
    logo_url: str = Field("", max_length=500)
    founded_date: datetime


class NewspaperCreate(NewspaperBase):
    pass


class NewspaperUpdate(NewspaperBase):
    is_active: bool = True


class NewspaperResponse(ApiModel):
    id: int
    name: str
    description: str
    publisher: str
    website: str
    logo_url: str
    founded_date: datetime
    created_at: datetime
    updated_at: datetime | None = None
    is_active: bool
    articles_count: int = 0


# --- Pagination ---

class PaginatedResponse(ApiModel, Generic[T]):
    items: list[T]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int


# --- Auth ---

class LoginRequest(ApiModel):
    # Blank values are rejected by the endpoint with a 400, not a 422.
    username: str = ""
    password: str = ""


class TokenResponse(ApiModel):
    token: str
    token_type: str = "Bearer"
    expires_at: datetime
    username: str


class TokenValidationResponse(ApiModel):
    message: str
    username: str
    expires_at: datetime


# --- Object storage ---

class S3UploadResponse(ApiModel):
    key: str
    size: int


class S3ObjectList(ApiModel):
    prefix: str | None = None
    keys: list[str] = []
