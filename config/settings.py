"""
Application settings and configuration
"""
from pathlib import Path
from typing import Tuple
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application configuration"""

    # Output
    output_file: Path = Path("out.png")
    render_mode: str = "path"  # "path" or "grid"

    # Binarization
    background_rgba: Tuple[int, int, int, int] = (255, 255, 255, 255)

    # Logging
    log_level: str = "WARNING"
    log_format: str = Field(default="%(levelname)s %(name)s: %(message)s")

    class Config:
        env_prefix = "DRAWLINGS_"


settings = Settings()
