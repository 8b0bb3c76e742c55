"""
Bot API response models.

Every API method answers with the same envelope: an ``ok`` flag, the
method result on success, or an ``error_code``/``description`` pair on
failure. Failed responses may carry ``parameters`` with hints on how the
caller should proceed (e.g. ``retry_after`` on rate limits).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResponseParameters(BaseModel):
    """Hints attached to a failed response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    retry_after: Optional[float] = Field(
        default=None,
        description="Seconds to wait before the request can be repeated (rate limit)",
    )
    migrate_to_chat_id: Optional[int] = Field(
        default=None,
        description="The group has been migrated to a supergroup with this identifier",
    )

    @field_validator("retry_after", mode="before")
    @classmethod
    def ignore_non_numeric_retry_after(cls, value: Any) -> Any:
        """Only a JSON number is a wait hint; anything else is dropped."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


class ApiResponse(BaseModel):
    """
    Structural result of one completed API attempt.

    Produced by the transport for any well-formed response, regardless of
    HTTP status. Transport-level failures are raised instead.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    ok: bool = Field(..., description="True if the request succeeded")
    result: Any = Field(default=None, description="Method result (only when ok)")
    error_code: Optional[int] = Field(
        default=None, description="Error status class (only when not ok)"
    )
    description: Optional[str] = Field(
        default=None, description="Human-readable error description"
    )
    parameters: Optional[ResponseParameters] = Field(
        default=None, description="Optional hints for automatic error handling"
    )

    @property
    def retry_after(self) -> Optional[float]:
        """Server-declared wait hint, if any."""
        if self.parameters is None:
            return None
        return self.parameters.retry_after
