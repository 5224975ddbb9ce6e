"""Configuration for the line protocol encoder"""
from pathlib import Path
from typing import Dict, Literal, Optional
from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Environment-based encoder settings"""

    # Service identification
    service_name: str = Field(default="lineprotocol-encoder", description="Service name")
    service_version: str = Field(default="1.0.0", description="Service version")

    # Encoding policy
    require_fields: bool = Field(default=False, description="Reject points without fields")
    skip_invalid: bool = Field(default=False, description="Log and drop invalid records instead of failing")
    default_tags_str: str = Field(default="", description="Tags added to every point (comma-separated key=value)")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path")

    class Config:
        env_prefix = ""
        case_sensitive = False

    @validator('log_level', pre=True)
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    @validator('log_file')
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def default_tags(self) -> Dict[str, str]:
        """Get default tags as a mapping"""
        tags = {}
        for tag in self.default_tags_str.split(','):
            if '=' in tag:
                key, value = tag.split('=', 1)
                tags[key.strip()] = value.strip()
        return tags
