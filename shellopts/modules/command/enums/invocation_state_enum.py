from enum import Enum

class InvocationState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    EXITED = "exited"
    SPAWN_FAILED = "spawn_failed"
