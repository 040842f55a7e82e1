"""Mini README: Runtime configuration for the Moneycount widget.

Structure:
    * MoneycountSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and the web app.

Usage:
    Variables use the ``MONEYCOUNT_`` prefix (for example
    ``MONEYCOUNT_INTERFACE_PORT=9000``) and may also live in a ``.env`` file.
    Currency labels and the confirm key only affect rendering; the ledger
    core never reads settings.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class MoneycountSettings(BaseSettings):
    """Runtime configuration for the ledger service."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger blob.",
    )
    storage_filename: str = Field(
        "moneycount.json",
        description="Name of the JSON key/value file inside ``data_directory``.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web widget to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web widget exposes.",
        ge=1,
        le=65535,
    )
    left_currency: str = Field("CAD", description="Label of the left column.")
    right_currency: str = Field("RMB", description="Label of the right column.")
    confirm_key: str = Field(
        "Enter",
        description="Key that submits the draft entry while typing.",
    )

    class Config:
        env_prefix = "MONEYCOUNT_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure the data directory expands user paths and exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON storage file."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> MoneycountSettings:
    """Return cached settings so every module sees the same configuration."""

    return MoneycountSettings()
