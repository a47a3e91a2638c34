"""Application configuration loaded from the settings file and environment."""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from media_transcriber.exceptions import ConfigurationError

DEFAULT_SETTINGS_FILE = ".env"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AWSConfig(BaseModel, frozen=True):
    """AWS credentials and region."""

    region: str = Field(min_length=1)
    access_key: str = Field(min_length=1)
    secret_key: str = Field(min_length=1)


class StorageConfig(BaseModel, frozen=True):
    """S3 object storage configuration."""

    endpoint: str = "s3.amazonaws.com"
    bucket_name: str = "vault"
    secure: bool = True


class TranscribeConfig(BaseModel, frozen=True):
    """AWS Transcribe job configuration."""

    language_code: str = "en-US"
    poll_interval: float = Field(default=1.0, gt=0)
    seconds_per_percent: float = Field(default=2.0, gt=0)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    aws: AWSConfig
    storage: StorageConfig = StorageConfig()
    transcribe: TranscribeConfig = TranscribeConfig()
    log_level: LogLevel = "WARNING"


def load_config(settings_file: str = DEFAULT_SETTINGS_FILE) -> AppConfig:
    """
    Loads configuration from the settings file and environment variables.

    Values already present in the environment win over the settings file.

    Raises:
        ConfigurationError: If the settings file is missing or a value is invalid.
    """
    if not load_dotenv(settings_file):
        raise ConfigurationError(f"failed to load settings file '{settings_file}'")

    try:
        return AppConfig(
            aws=AWSConfig(
                region=os.getenv("AWS_REGION", ""),
                access_key=os.getenv("AWS_ACCESS_KEY", ""),
                secret_key=os.getenv("AWS_SECRET_ACCESS_KEY", ""),
            ),
            storage=StorageConfig(
                endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
                bucket_name=os.getenv("TRANSCRIBE_BUCKET", "vault"),
            ),
            transcribe=TranscribeConfig(
                language_code=os.getenv("TRANSCRIBE_LANGUAGE_CODE", "en-US"),
                poll_interval=os.getenv("TRANSCRIBE_POLL_INTERVAL", "1.0"),
            ),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(f"missing or invalid settings: {fields}", e) from e
