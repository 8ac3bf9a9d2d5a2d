"""User identity and session models."""

from pydantic import BaseModel


class User(BaseModel):
    """Authenticated user identity."""

    id: int | None = None
    email: str = ""
    username: str = ""
    full_name: str = ""
    role: str = "user"
    active: bool = True

    @property
    def display_name(self) -> str:
        return self.full_name or self.username or self.email


class Session(BaseModel):
    """Bearer credential plus the identity it was issued for."""

    token: str
    user: User
