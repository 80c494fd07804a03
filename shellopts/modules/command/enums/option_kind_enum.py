from enum import Enum

class OptionKind(str, Enum):
    FLAGS = "flags"
    SEQUENCE = "sequence"
    TEXT = "text"
    UNKNOWN = "unknown"
