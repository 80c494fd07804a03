# invocation_state_machine.py
from typing import List, Optional
from transitions import Machine
from shellopts.modules.command.enums.invocation_state_enum import InvocationState


class Invocation:
    """
    One run of a command: the argv it was started with and how it ended.
    """
    def __init__(self, program: str, args: List[str], cwd: str):
        self.program = program
        self.args = list(args)
        self.cwd = cwd
        self.pid: Optional[int] = None
        self.exit_code: Optional[int] = None
        self.error: Optional[BaseException] = None


class InvocationStateMachine:
    """
    Wraps an Invocation with its lifecycle:
    pending -> running -> exited, or pending -> spawn_failed.
    """
    def __init__(self, invocation: Invocation):
        self.invocation = invocation
        self.machine = Machine(
            model=self.invocation,
            states=[s.value for s in InvocationState],
            initial=InvocationState.PENDING.value,
            auto_transitions=False,
        )
        self.machine.add_transition("start", InvocationState.PENDING.value, InvocationState.RUNNING.value)
        self.machine.add_transition("exit", InvocationState.RUNNING.value, InvocationState.EXITED.value)
        self.machine.add_transition("spawn_failed", InvocationState.PENDING.value, InvocationState.SPAWN_FAILED.value)

    @property
    def state(self) -> InvocationState:
        return InvocationState(self.invocation.state)

    def started(self, pid: int):
        self.invocation.pid = pid
        self.invocation.start()

    def exited(self, exit_code: int):
        self.invocation.exit_code = exit_code
        self.invocation.exit()

    def failed_to_spawn(self, error: BaseException):
        self.invocation.error = error
        self.invocation.spawn_failed()
