"""Common Pydantic schemas used across the application."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: ErrorDetail


class Identity(BaseModel):
    """Authenticated caller, as established by the session."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    role: str


class HandlerResult(BaseModel):
    """
    Outcome of a page handler.

    Handlers report user-visible messages here instead of queueing them;
    the route decides whether to render them directly or flash them.
    """

    errors: list[str] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no error was recorded."""
        return not self.errors

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_notice(self, message: str) -> None:
        self.notices.append(message)

    def messages(self) -> list[dict[str, str]]:
        """Flatten to the flash message shape used by the templates."""
        return [{"message": m, "category": "danger"} for m in self.errors] + [
            {"message": m, "category": "success"} for m in self.notices
        ]
