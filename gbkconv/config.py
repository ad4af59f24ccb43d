from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Literal, case-sensitive suffix check; not configurable.
SOURCE_EXTENSIONS = (".c", ".h")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GBKCONV_", extra="ignore")

    # Chinese text detection
    cjk_range_start: int = Field(0x4E00, ge=0, le=0x10FFFF, description="First code point counted as a Chinese character")
    cjk_range_end: int = Field(0x9FFF, ge=0, le=0x10FFFF, description="Last code point counted as a Chinese character")

    # Logging and console output
    log_level: str = Field("INFO", description="Root logging level")
    log_directory: Optional[Path] = Field(None, description="Directory for a rotating log file, console only when unset")
    show_progress: bool = Field(True, description="Show a progress bar while scanning")

    @model_validator(mode="after")
    def _check_range(self) -> "Settings":
        if self.cjk_range_start > self.cjk_range_end:
            raise ValueError("cjk_range_start must not exceed cjk_range_end")
        return self

    @property
    def cjk_range(self) -> Tuple[int, int]:
        return self.cjk_range_start, self.cjk_range_end


settings = Settings()
