import asyncio
from typing import Any, Dict, List, Optional, Union
from shellopts.modules.command.errors import ProcessExitError
from shellopts.modules.command.machines.invocation_state_machine import Invocation, InvocationStateMachine
from shellopts.modules.command.models.command_configuration import CommandConfiguration
from shellopts.modules.command.models.formatted_args import FormattedArgs
from shellopts.modules.command.option_formatter import Options, OptionFormatter, TransformOption
from shellopts.modules.log.simple_logger import get_logger


class CommandRunner:
    """
    A command bound to one executable name and its default configuration.

    The first option of build/exec may override the configuration for that call:
      - cwd (default: current directory at construction), working directory
      - printCommand (default: True), print the command before execution; never printed when quiet
      - quiet (default: False), suppress stdout and stderr

    Example:
        docker = CommandRunner("docker")
        docker.build("run", {"rm": True}, "hello-world")   # -> "docker run --rm hello-world"
        await docker.exec({"quiet": True}, "pull", "alpine")
    """

    def __init__(
        self,
        name: str,
        options: Optional[Union[Dict[str, Any], CommandConfiguration]] = None,
        transform: Optional[TransformOption] = None,
    ):
        self._name = name
        self.options = CommandConfiguration.from_overrides(options)
        self.transform: TransformOption = transform or OptionFormatter.default_transform
        self.logger = get_logger(__name__, {"command": name})

    @property
    def name(self) -> str:
        return self._name

    def _format(self, options) -> FormattedArgs:
        formatted = OptionFormatter.format(options, self.transform)
        self.logger.debug(f"Formatted args: {formatted.args}")
        return formatted

    def build(self, *options: Options) -> str:
        """Build the command line as a string without executing it. Control keys are dropped."""
        return self._format(options).command_line(self._name)

    def build_args(self, *options: Options) -> List[str]:
        """Build the argument list (without the program name) without executing it."""
        return self._format(options).args

    async def exec(self, *options: Options) -> None:
        """
        Execute the command and wait for it to terminate.

        Raises:
            ProcessExitError: the process exited with a non-zero code
            OSError: the process could not be started (missing cwd or executable, permissions)
        """
        formatted = self._format(options)
        quiet = formatted.quiet if formatted.quiet is not None else self.options.quiet
        print_command = formatted.print_command if formatted.print_command is not None else self.options.print_command
        cwd = formatted.cwd if formatted.cwd else self.options.cwd

        if not quiet and print_command:
            print(f"$ {formatted.command_line(self._name)}", flush=True)

        return await self._spawn(formatted.args, quiet, cwd)

    async def _spawn(self, args: List[str], quiet: bool, cwd: str) -> None:
        invocation = InvocationStateMachine(Invocation(self._name, args, cwd))
        stdio = asyncio.subprocess.DEVNULL if quiet else None

        self.logger.info(f"Spawning in {cwd}: {args}")
        try:
            process = await asyncio.create_subprocess_exec(
                self._name,
                *args,
                cwd=cwd,
                stdout=stdio,
                stderr=stdio,
            )
        except OSError as e:
            invocation.failed_to_spawn(e)
            self.logger.error(f"Failed to start process: {e}")
            raise

        invocation.started(process.pid)
        exit_code = await process.wait()
        invocation.exited(exit_code)
        self.logger.info(f"Exited with code {exit_code}")

        if exit_code != 0:
            self.logger.error(f"Command failed with exit code {exit_code}")
            raise ProcessExitError(exit_code, invocation.invocation)
