# app/brands/schemas.py
from datetime import date, datetime
from typing import List

from pydantic import AnyHttpUrl, BaseModel, Field, TypeAdapter, field_validator

MIN_FOUNDED_YEAR = 1800
URL_MAX_LENGTH = 2048  # = String(2048) de las columnas

_url_adapter = TypeAdapter(AnyHttpUrl)


class BrandIn(BaseModel):
    """
    Payload de crear/editar marca. PUT reemplaza TODOS los campos
    (lo que no venga queda en None).
    """
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    logo_url: str | None = Field(default=None, max_length=URL_MAX_LENGTH)
    website: str | None = Field(default=None, max_length=URL_MAX_LENGTH)
    founded_year: int | None = None
    country: str | None = Field(default=None, max_length=50)
    industry: str | None = Field(default=None, max_length=50)

    @field_validator(
        "description", "logo_url", "website", "founded_year", "country", "industry",
        mode="before",
    )
    @classmethod
    def _blank_is_none(cls, v):
        # el formulario del front manda "" en los campos vacíos
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name is required")
        return v

    @field_validator("logo_url", "website")
    @classmethod
    def _valid_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        # validamos pero guardamos el string tal cual (sin normalizar).
        # "www.apple.com" sin esquema también vale, pero entonces el host
        # necesita un dominio con punto ("nope" no es una URL)
        has_scheme = "://" in v
        try:
            url = _url_adapter.validate_python(v if has_scheme else f"http://{v}")
        except ValueError:
            raise ValueError("must be a valid URL")
        if not has_scheme and "." not in (url.host or ""):
            raise ValueError("must be a valid URL")
        return v

    @field_validator("founded_year")
    @classmethod
    def _year_in_range(cls, v: int | None) -> int | None:
        if v is None:
            return v
        current = date.today().year
        if not MIN_FOUNDED_YEAR <= v <= current:
            raise ValueError(f"founded_year must be between {MIN_FOUNDED_YEAR} and {current}")
        return v


class BrandOut(BaseModel):
    id: int
    name: str
    description: str | None = None
    logo_url: str | None = None
    website: str | None = None
    founded_year: int | None = None
    country: str | None = None
    industry: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class BrandPage(BaseModel):
    brands: List[BrandOut]
    total: int
    page: int
    totalPages: int
    hasNext: bool
    hasPrev: bool
