"""
Configuration settings for the enrolment methods upload service
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class EnrolmentUploadSettings(BaseSettings):
    """Upload configuration settings"""

    # Namespace dei messaggi del report
    upload_component: str = Field(default="local_uploadenrolmentmethods", env="UPLOAD_COMPONENT")

    # Limiti upload
    upload_max_file_size_kb: int = Field(default=2048, env="UPLOAD_MAX_FILE_SIZE_KB")  # 2MB
    upload_allowed_extensions: list[str] = Field(default=[".csv"], env="UPLOAD_ALLOWED_EXTENSIONS")

    # Valore della colonna disable che disabilita il metodo
    upload_disabled_flag: str = Field(default="1", env="UPLOAD_DISABLED_FLAG")

    # Logging
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


@lru_cache()
def get_upload_settings() -> EnrolmentUploadSettings:
    """Get cached upload settings instance"""
    return EnrolmentUploadSettings()
