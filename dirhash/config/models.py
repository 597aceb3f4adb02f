from pydantic import BaseModel, Field
from typing import Literal


class SigningConfig(BaseModel):
    """Signing defaults. Keys always come from ``--key``, never from config."""

    passphrase: str | None = None


class DirhashConfig(BaseModel):
    signing: SigningConfig = Field(default_factory=SigningConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
