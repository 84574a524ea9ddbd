import tomllib
from pathlib import Path
from typing import Literal

import tomlkit
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aave_aptos.logging import logger
from aave_aptos.math.constants import WAD_DECIMALS

CONFIG_DIR = Path.home() / ".config" / "aave_aptos"
CONFIG_FILE = CONFIG_DIR / "config.toml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AAVE_APTOS_")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Number of decimal places used when rendering raw integers from the console
    display_decimals: int = Field(default=WAD_DECIMALS, ge=0)


def load_config_from_file(config_path: Path) -> Settings:
    return Settings.model_validate(
        tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )
    logger.info(f"Saved configuration to {config_path}.")


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
logger.setLevel(settings.log_level)
