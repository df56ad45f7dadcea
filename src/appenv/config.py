"""Configuration for appenv"""
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Minimal configuration"""

    # Logging
    DEBUG = os.getenv("APPENV_DEBUG", "false").lower() == "true"
    LOG_LEVEL = os.getenv("APPENV_LOG_LEVEL", "WARNING").upper()

    # Builder defaults
    APP_NAME = os.getenv("APPENV_APP_NAME", "app")
    PROPERTIES_HEADER = os.getenv("APPENV_PROPERTIES_HEADER", "App properties")

    @classmethod
    def log_level(cls) -> str:
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL


config = Config()
