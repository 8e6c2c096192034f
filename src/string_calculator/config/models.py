from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class StoreConfig(BaseModel):
    # Store selector; "none" runs the calculator without persistence.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> StoreConfig:
        # For jsonl kind, a path is required to avoid silent defaults.
        if self.kind == "jsonl" and not self.path:
            raise ValueError("store.path is required when kind is 'jsonl'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stderr", "jsonl", "none"] = "none"
    path: str | None = None
    level: Literal["debug", "info", "error"] = "info"

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        if self.kind == "jsonl" and not self.path:
            raise ValueError("logging.path is required when kind is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int = 1
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
