import os

from pydantic import BaseModel
from pydantic import Field

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.enums.desktop_environment import DesktopEnvironment


class DetectionReport(BaseModel):
    platform: str
    xdg_current_desktop: str | None = Field(default=None)
    desktop: str | None = Field(default=None)
    gtk: bool = Field(default=False)
    qt: bool = Field(default=False)

    @classmethod
    def from_desktop(
        cls, de: DesktopEnvironment | None, xdg_current_desktop: str | None = None
    ) -> "DetectionReport":
        return cls(
            platform=str(cnst.HOST_PLATFORM),
            xdg_current_desktop=xdg_current_desktop,
            desktop=str(de) if de is not None else None,
            gtk=de.gtk() if de is not None else False,
            qt=de.qt() if de is not None else False,
        )

    @classmethod
    def collect(cls) -> "DetectionReport":
        """Run detection and record what it saw"""
        return cls.from_desktop(
            DesktopEnvironment.detect(),
            os.getenv(cnst.XDG_CURRENT_DESKTOP_VAR),
        )
