"""Auth-related data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    """Immutable record decoded from a provider response."""
    model_config = ConfigDict(frozen=True, strict=True)


class OAuthToken(_Record):
    """Response from the Battle.net OAuth2 token endpoint."""
    access_token: str
    token_type: str
    expires_in: int = Field(ge=0, description="Seconds until the token expires")

    def as_row(self) -> dict[str, str | int]:
        return self.model_dump()

    def __str__(self) -> str:
        return (
            f"access_token: {self.access_token}\n"
            f"token_type: {self.token_type}\n"
            f"expires_in: {self.expires_in}\n"
        )


class Authority(_Record):
    """A role or permission granted to a token."""
    authority: str


class ValidatedToken(_Record):
    """Response from the token introspection endpoint."""
    scope: tuple[str, ...]
    exp: int = Field(description="Absolute expiry in epoch seconds")
    authorities: tuple[Authority, ...]
    client_id: str

    def as_row(self) -> dict[str, str | int]:
        """Flatten scopes and authorities into comma-joined strings."""
        return {
            "scope": ", ".join(self.scope),
            "exp": self.exp,
            "authorities": ", ".join(a.authority for a in self.authorities),
            "client_id": self.client_id,
        }

    def __str__(self) -> str:
        authorities = [a.authority for a in self.authorities]
        return (
            f"scope: {list(self.scope)}\n"
            f"exp: {self.exp}\n"
            f"authorities: {authorities}\n"
            f"client_id: {self.client_id}\n"
        )
