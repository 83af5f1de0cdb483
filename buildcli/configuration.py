"""Build configurations understood by the build engine."""

from enum import Enum


class Configuration(Enum):
    """Configuration a build is performed with."""

    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        return self.value
