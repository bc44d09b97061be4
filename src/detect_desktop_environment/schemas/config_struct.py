from typing import Literal

from pydantic import BaseModel
from pydantic import Field

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging configuration"""
    enable_console: bool = Field(default=False, description="Print log records to stderr")
    console_level: LogLevel = Field(default="INFO", description="Console log level (DEBUG, INFO, WARNING, ERROR)")
    enable_file: bool = Field(default=False, description="Write log records to the state directory")
    file_level: LogLevel = Field(default="DEBUG", description="Log level for the log file")
    enable_colors: bool = Field(default=True, description="Colorize console output")


class Config(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
