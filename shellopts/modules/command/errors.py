"""Errors raised while running a command."""


class ProcessExitError(RuntimeError):
    """
    The process started but terminated with a non-zero exit code.

    `invocation` is the finished run (program, args, cwd, pid, exit code) when known.
    """

    def __init__(self, exit_code: int, invocation=None):
        super().__init__(f"Exit with code: {exit_code}")
        self.exit_code = exit_code
        self.invocation = invocation
