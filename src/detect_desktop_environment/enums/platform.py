import sys
from enum import Enum
from enum import auto


class HostPlatform(Enum):
    MACOS = auto()
    WINDOWS = auto()
    OTHER = auto()

    @classmethod
    def detect(cls) -> "HostPlatform":
        if sys.platform == "darwin":
            return cls.MACOS
        elif sys.platform == "win32":
            return cls.WINDOWS
        return cls.OTHER

    def __str__(self):
        return self.name.lower()
