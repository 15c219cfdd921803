from pydantic import BaseModel, Field
from typing import Literal


class OutputConfig(BaseModel):
    directory: str = "."
    overwrite: bool = False
    on_warnings: Literal["ignore", "warn", "fail"] = "warn"


class QuartoConfig(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
