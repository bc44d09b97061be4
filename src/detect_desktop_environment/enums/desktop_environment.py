import os
from enum import Enum
from enum import auto
from functools import total_ordering
from typing import Optional

from loguru import logger

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.enums.platform import HostPlatform


@total_ordering
class DesktopEnvironment(Enum):
    """Desktop environments known to the detector.

    The set of members is open: new desktop environments may be added in
    any release, so code matching on this enum must keep a fallback branch
    instead of assuming every member is handled.

    Members are ordered by declaration and are hashable, so they can be
    sorted and used as dictionary keys.
    """

    BUDGIE = auto()
    CINNAMON = auto()
    COSMIC = auto()
    DDE = auto()
    EDE = auto()
    ENDLESS = auto()
    ENLIGHTENMENT = auto()
    GNOME = auto()
    HYPRLAND = auto()
    KDE = auto()
    LXDE = auto()
    LXQT = auto()
    MACOS = auto()
    MATE = auto()
    OLD = auto()
    PANTHEON = auto()
    RAZOR = auto()
    ROX = auto()
    SWAY = auto()
    TDE = auto()
    UNITY = auto()
    WINDOWS = auto()
    XFCE = auto()

    @classmethod
    def detect(cls) -> Optional["DesktopEnvironment"]:
        """Detect the desktop environment of the current process.

        macOS and Windows hosts always resolve to their own member. On other
        hosts the value of ``XDG_CURRENT_DESKTOP`` is parsed; ``None`` is
        returned when it is unset or can't be classified.
        """
        return _DETECTORS[cnst.HOST_PLATFORM]()

    @classmethod
    def from_freedesktop(cls, name: str) -> Optional["DesktopEnvironment"]:
        """Look up a single registered Freedesktop.org desktop name.

        Matching is exact and case sensitive: ``"KDE"`` is known, ``"kde"``
        is not.
        """
        return _FREEDESKTOP_NAMES.get(name)

    @classmethod
    def from_xdg_name(cls, name: str) -> Optional["DesktopEnvironment"]:
        """Look up a single ``XDG_CURRENT_DESKTOP`` entry.

        Accepts every registered Freedesktop.org name plus the names seen in
        the wild that were never registered (window managers, legacy
        spellings).
        """
        de = cls.from_freedesktop(name)
        if de is not None:
            return de
        return _EXTRA_XDG_NAMES.get(name)

    @classmethod
    def from_xdg_current_desktop(cls, raw: str) -> Optional["DesktopEnvironment"]:
        """Parse a colon separated ``XDG_CURRENT_DESKTOP`` value.

        Unknown entries such as a distribution prefix (``ubuntu:GNOME``) are
        skipped. Repeated entries for the same desktop are fine, but two
        entries naming different desktops make the value ambiguous and the
        result is ``None``.
        """
        resolved = None
        for token in raw.split(cnst.XDG_CURRENT_DESKTOP_SEPARATOR):
            de = cls.from_xdg_name(token)
            if de is None:
                logger.debug(f"Skipping unknown XDG desktop name: {token!r}")
                continue

            if resolved is None:
                resolved = de
            elif resolved != de:
                logger.debug(
                    f"Conflicting desktops in {raw!r}: {resolved} and {de}"
                )
                return None

        return resolved

    def gtk(self) -> bool:
        """Whether the desktop environment is built on GTK"""
        return self in _GTK_DESKTOPS

    def qt(self) -> bool:
        """Whether the desktop environment is built on Qt"""
        return self in _QT_DESKTOPS

    def __lt__(self, other):
        if not isinstance(other, DesktopEnvironment):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.name.lower()


##==> Registered names from the freedesktop.org menu specification
##############################################################
_FREEDESKTOP_NAMES = {
    "Budgie": DesktopEnvironment.BUDGIE,
    "Cinnamon": DesktopEnvironment.CINNAMON,
    "COSMIC": DesktopEnvironment.COSMIC,
    "DDE": DesktopEnvironment.DDE,
    "EDE": DesktopEnvironment.EDE,
    "Endless": DesktopEnvironment.ENDLESS,
    "Enlightenment": DesktopEnvironment.ENLIGHTENMENT,
    "GNOME": DesktopEnvironment.GNOME,
    "GNOME-Classic": DesktopEnvironment.GNOME,
    "GNOME-Flashback": DesktopEnvironment.GNOME,
    "KDE": DesktopEnvironment.KDE,
    "LXDE": DesktopEnvironment.LXDE,
    "LXQt": DesktopEnvironment.LXQT,
    "MATE": DesktopEnvironment.MATE,
    "Old": DesktopEnvironment.OLD,
    "Pantheon": DesktopEnvironment.PANTHEON,
    "Razor": DesktopEnvironment.RAZOR,
    "ROX": DesktopEnvironment.ROX,
    "TDE": DesktopEnvironment.TDE,
    "Unity": DesktopEnvironment.UNITY,
    "XFCE": DesktopEnvironment.XFCE,
}

##==> Unregistered names observed in XDG_CURRENT_DESKTOP
##############################################################
_EXTRA_XDG_NAMES = {
    "X-Cinnamon": DesktopEnvironment.CINNAMON,
    "ENLIGHTENMENT": DesktopEnvironment.ENLIGHTENMENT,
    "Hyprland": DesktopEnvironment.HYPRLAND,
    "SWAY": DesktopEnvironment.SWAY,
    "sway": DesktopEnvironment.SWAY,
    "Deepin": DesktopEnvironment.DDE,
}

##==> Toolkit families
##############################################################
_GTK_DESKTOPS = frozenset(
    {
        DesktopEnvironment.BUDGIE,
        DesktopEnvironment.CINNAMON,
        DesktopEnvironment.COSMIC,
        DesktopEnvironment.DDE,
        DesktopEnvironment.GNOME,
        DesktopEnvironment.LXDE,
        DesktopEnvironment.MATE,
        DesktopEnvironment.PANTHEON,
        DesktopEnvironment.UNITY,
        DesktopEnvironment.XFCE,
    }
)
_QT_DESKTOPS = frozenset(
    {
        DesktopEnvironment.KDE,
        DesktopEnvironment.LXQT,
        DesktopEnvironment.RAZOR,
        DesktopEnvironment.TDE,
    }
)


##==> Per-host detection strategies
##############################################################
def _detect_macos() -> Optional[DesktopEnvironment]:
    return DesktopEnvironment.MACOS


def _detect_windows() -> Optional[DesktopEnvironment]:
    return DesktopEnvironment.WINDOWS


def _detect_xdg() -> Optional[DesktopEnvironment]:
    raw = os.getenv(cnst.XDG_CURRENT_DESKTOP_VAR)
    if raw is None:
        logger.debug(f"{cnst.XDG_CURRENT_DESKTOP_VAR} is not set")
        return None
    return DesktopEnvironment.from_xdg_current_desktop(raw)


_DETECTORS = {
    HostPlatform.MACOS: _detect_macos,
    HostPlatform.WINDOWS: _detect_windows,
    HostPlatform.OTHER: _detect_xdg,
}
