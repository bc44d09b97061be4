#!/usr/bin/env python3
import os
from pathlib import Path

from detect_desktop_environment.enums.platform import HostPlatform

##==> BASE
##############################################################
APPLICATION_NAME = "detect-desktop-environment"

##==> Paths according to the XDG base directory conventions
##############################################################
XDG_CONFIG_HOME = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
XDG_STATE_HOME = Path(os.getenv("XDG_STATE_HOME", Path.home() / ".local" / "state"))

##==> Application config and log locations
##############################################################
APP_CONFIG_DIR = XDG_CONFIG_HOME / APPLICATION_NAME
APP_STATE_DIR = XDG_STATE_HOME / APPLICATION_NAME

APP_CONFIG_FILE = APP_CONFIG_DIR / (APPLICATION_NAME + ".json")
APP_LOG_DIR = APP_STATE_DIR / "logs"

##==> Environment variables consumed by the detector
##############################################################
XDG_CURRENT_DESKTOP_VAR = "XDG_CURRENT_DESKTOP"
XDG_CURRENT_DESKTOP_SEPARATOR = ":"

##==> Default configuration
DEFAULT_CONFIG = {
    "logging": {
        "enable_console": False,
        "console_level": "INFO",
        "enable_file": False,
        "file_level": "DEBUG",
        "enable_colors": True,
    },
}


##==> Host
##############################################################
HOST_PLATFORM = HostPlatform.detect()
