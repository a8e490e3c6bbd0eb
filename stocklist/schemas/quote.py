from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class QuoteSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    symbol: Optional[str] = ""
    name: Optional[str] = ""
    # provider sends either a JSON number or a numeric string
    price: Union[int, float, str, None] = None
    percent_change: Union[int, float, str, None] = None

    @field_validator("symbol", "name", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ErrorPayloadSchema(BaseModel):
    """Alternate response shape used by the provider to report failures."""

    model_config = ConfigDict(extra="ignore")

    code: Optional[int] = 0
    message: Optional[str] = ""
    status: Optional[str] = ""

    @field_validator("code", mode="before")
    @classmethod
    def null_code_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("message", "status", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value
