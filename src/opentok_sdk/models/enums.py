"""
Wire enumerations. Values are the exact strings the REST API and tokens use.
"""

from enum import Enum


class MediaMode(str, Enum):
    RELAYED = "relayed"
    ROUTED = "routed"


class ArchiveMode(str, Enum):
    MANUAL = "manual"
    ALWAYS = "always"


class OutputMode(str, Enum):
    COMPOSED = "composed"
    INDIVIDUAL = "individual"


class LayoutType(str, Enum):
    BEST_FIT = "bestFit"
    PIP = "pip"
    VERTICAL_PRESENTATION = "verticalPresentation"
    HORIZONTAL_PRESENTATION = "horizontalPresentation"
    CUSTOM = "custom"


class ArchiveStatus(str, Enum):
    AVAILABLE = "available"
    DELETED = "deleted"
    EXPIRED = "expired"
    FAILED = "failed"
    PAUSED = "paused"
    STARTED = "started"
    STOPPED = "stopped"
    UPLOADED = "uploaded"
    UNKNOWN = "unknown"


class BroadcastStatus(str, Enum):
    STARTED = "started"
    STOPPED = "stopped"
    UNKNOWN = "unknown"
