from typing import Any

from pydantic import BaseModel, Field, model_validator


class DocumentIn(BaseModel):
    file: str = Field(..., examples=["docs/events.md"], description="Identifier reported in findings.")
    content: str = Field(..., description="Raw document text.")


class ValidationOptions(BaseModel):
    vendor: str | None = Field(default=None, examples=["x"])
    strict: bool = Field(default=False)
    scan_keys: bool = Field(default=False)
    skip_tokens: list[str] = Field(default_factory=list)
    grammar: str = Field(default="gts-1")


class ValidateRequest(ValidationOptions):
    documents: list[DocumentIn] = Field(..., min_length=1)


class ValidateUrlsRequest(ValidationOptions):
    urls: str | list[str] = Field(
        ...,
        examples=["https://example.com/docs/events.md"],
        description="One URL (string) or multiple URLs (list of strings) to fetch and validate.",
    )

    @model_validator(mode="before")
    @classmethod
    def _compat_url(cls, data: Any) -> Any:
        """Accept ``url`` (singular) as an alias."""
        if isinstance(data, dict) and "url" in data and "urls" not in data:
            data["urls"] = data.pop("url")
        return data

    @property
    def urls_list(self) -> list[str]:
        if isinstance(self.urls, str):
            return [self.urls]
        return list(self.urls)


__all__ = ["DocumentIn", "ValidateRequest", "ValidateUrlsRequest", "ValidationOptions"]
