"""Core Configuration"""
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from imglift_core.constants import DEFAULT_UPLOAD_BODY


def _parse_json_object(raw: str, name: str) -> Dict[str, Any]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{name} is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a JSON object")
    return value


class UploadConfig(BaseSettings):
    """
    Upload endpoint configuration.

    Header and body values are kept as raw JSON strings, the way the host
    application stores them, and parsed on access.
    Environment variables take precedence over defaults.
    """

    api_endpoint: str = Field(description="Upload endpoint URL")
    upload_header: str = Field(default="{}", description="JSON object of request headers")
    upload_body: str = Field(default=DEFAULT_UPLOAD_BODY, description="JSON body template")
    image_url_path: str = Field(description="Field path of the URL in the JSON response")

    vault_root: Path = Field(default=Path("."))
    request_timeout: Optional[float] = Field(default=None, gt=0.0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "case_sensitive": False,
    }

    @field_validator("api_endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid endpoint URL: {v}")
        return v

    @field_validator("upload_header")
    @classmethod
    def validate_header(cls, v: str) -> str:
        headers = _parse_json_object(v, "upload_header")
        for key, value in headers.items():
            if not isinstance(value, str):
                raise ValueError(f"Header value for {key!r} must be a string")
        return v

    @field_validator("upload_body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        _parse_json_object(v, "upload_body")
        return v

    @field_validator("image_url_path")
    @classmethod
    def validate_url_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("image_url_path must not be empty")
        return v.strip()

    @property
    def headers(self) -> Dict[str, str]:
        return _parse_json_object(self.upload_header, "upload_header")

    @property
    def body_template(self) -> Dict[str, Any]:
        return _parse_json_object(self.upload_body, "upload_body")


@lru_cache
def get_upload_config() -> UploadConfig:
    """Get or create upload configuration singleton."""
    return UploadConfig()
