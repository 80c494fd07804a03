"""Build and run command lines from strings, lists and flag mappings."""

from typing import Any, Dict, List, Optional

from shellopts.modules.command.command_runner import CommandRunner
from shellopts.modules.command.errors import ProcessExitError
from shellopts.modules.command.models.command_configuration import CommandConfiguration
from shellopts.modules.command.models.formatted_args import FormattedArgs
from shellopts.modules.command.option_formatter import Options, default_transform, format_options
from shellopts.modules.commands.npm import NpmCommand, npm


def command(name: str, options: Optional[Dict[str, Any]] = None) -> CommandRunner:
    """
    Create a new command.

    Args:
        name: Executable name
        options: Optional defaults: cwd, printCommand, quiet
    """
    return CommandRunner(name, options)


cmd = command


def build(name: str, *options: Options) -> str:
    """
    Build a command as a string without executing it.

        build("docker", "run", {"rm": True}, "hello-world")  # -> "docker run --rm hello-world"
    """
    return command(name).build(*options)


def build_args(*options: Options) -> List[str]:
    """Flatten options into an argument list, e.g. ["run", "--rm", "hello-world"]."""
    return format_options(options).args


async def exec(name: str, *options: Options) -> None:
    """
    Execute a command with default configuration.

    The first option may override cwd, printCommand and quiet:

        await exec("npm", {"quiet": True}, "install")  # stdout and stderr suppressed
    """
    return await command(name).exec(*options)


__all__ = [
    "CommandConfiguration",
    "CommandRunner",
    "FormattedArgs",
    "NpmCommand",
    "ProcessExitError",
    "build",
    "build_args",
    "cmd",
    "command",
    "default_transform",
    "exec",
    "format_options",
    "npm",
]
