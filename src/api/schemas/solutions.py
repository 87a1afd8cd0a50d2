"""Pydantic schemas for solution link endpoints."""

from pydantic import BaseModel, HttpUrl, TypeAdapter, field_validator

_http_url = TypeAdapter(HttpUrl)


class SolutionLinkRequest(BaseModel):
    """Request to save a manual solution link."""

    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Reject anything that is not an http(s) URL; keep the text as submitted."""
        _http_url.validate_python(value)
        return value


class SolutionLinkResponse(BaseModel):
    """A single saved solution link."""

    contest_id: str
    url: str


class SolutionLinksResponse(BaseModel):
    """All saved solution links."""

    links: dict[str, str]
