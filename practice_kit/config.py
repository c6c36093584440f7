"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class PracticeConfig(BaseSettings):
    """Practice kit configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    # File reading configuration
    file_encoding: str = "utf-8"
    locked_file_retry_delay_seconds: float = 5.0
    lock_error_markers: List[str] = [
        "used by another process",
        "locked a portion of the file",
    ]
    
    # Divide numbers exercise
    min_operand_lines: int = 2
    
    # Display configuration
    display_precision: int = 2
    
    class Config:
        env_prefix = "PRACTICE_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = PracticeConfig()


def get_config() -> PracticeConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> PracticeConfig:
    """Reload configuration from environment"""
    global config
    config = PracticeConfig()
    return config
