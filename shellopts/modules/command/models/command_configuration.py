import os
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class CommandConfiguration(BaseModel):
    """
    Default behaviour of a command, used for every execution on a runner.
    The first option of an exec call can override each field for that call only.

    Example:
        config = CommandConfiguration(cwd="/home/user/project", printCommand=False)
        config = CommandConfiguration.from_overrides({"quiet": True})
    """
    model_config = ConfigDict(populate_by_name=True)

    cwd: str = Field(default_factory=os.getcwd, description="Working directory of the spawned process")
    print_command: bool = Field(True, alias="printCommand", description="Echo '$ <command>' before execution")
    quiet: bool = Field(False, description="Suppress stdout and stderr of the spawned process")

    @field_validator("cwd", mode="before")
    @classmethod
    def _path_to_str(cls, value):
        return os.fspath(value) if isinstance(value, os.PathLike) else value

    @classmethod
    def from_overrides(cls, overrides: Optional[Union[Dict[str, Any], "CommandConfiguration"]] = None) -> "CommandConfiguration":
        """
        Build a configuration from a dict of overrides, skipping unset (None) values.

        Fields missing from the overrides fall back to the environment (see from_env),
        then to the model defaults.
        """
        if isinstance(overrides, CommandConfiguration):
            return overrides.model_copy()
        values = cls._env_values()
        for key, value in (overrides or {}).items():
            if value is None:
                continue
            values["print_command" if key == "printCommand" else key] = value
        return cls(**values)

    @classmethod
    def from_env(cls) -> "CommandConfiguration":
        """
        Read defaults from the environment.

        SHELLOPTS_CWD, SHELLOPTS_PRINT_COMMAND and SHELLOPTS_QUIET are used when set.
        Every runner built through from_overrides starts from these values.
        """
        return cls.from_overrides()

    @staticmethod
    def _env_values() -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        cwd = os.getenv("SHELLOPTS_CWD")
        if cwd:
            values["cwd"] = cwd
        print_command = os.getenv("SHELLOPTS_PRINT_COMMAND")
        if print_command is not None:
            values["print_command"] = print_command.strip().lower() in _TRUTHY
        quiet = os.getenv("SHELLOPTS_QUIET")
        if quiet is not None:
            values["quiet"] = quiet.strip().lower() in _TRUTHY
        return values
