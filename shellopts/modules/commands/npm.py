from typing import Any, Dict, Optional
from shellopts.modules.command.command_runner import CommandRunner
from shellopts.modules.command.option_formatter import Options


class NpmCommand(CommandRunner):
    """
    npm runner with one method per sub-command.

    Each method prepends its sub-command, so npm.install({"save-dev": True}, "left-pad")
    runs `npm install --save-dev left-pad`.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__("npm", options)

    async def bin(self, *options: Options) -> None:
        return await self.exec("bin", *options)

    async def install(self, *options: Options) -> None:
        return await self.exec("install", *options)

    async def link(self, *options: Options) -> None:
        return await self.exec("link", *options)

    async def list(self, *options: Options) -> None:
        return await self.exec("list", *options)

    async def login(self, *options: Options) -> None:
        return await self.exec("login", *options)

    async def logout(self, *options: Options) -> None:
        return await self.exec("logout", *options)

    async def pack(self, *options: Options) -> None:
        return await self.exec("pack", *options)

    async def prune(self, *options: Options) -> None:
        return await self.exec("prune", *options)

    async def publish(self, *options: Options) -> None:
        return await self.exec("publish", *options)

    async def run(self, *options: Options) -> None:
        return await self.exec("run", *options)

    async def test(self, *options: Options) -> None:
        return await self.exec("test", *options)

    async def uninstall(self, *options: Options) -> None:
        return await self.exec("uninstall", *options)

    async def unpublish(self, *options: Options) -> None:
        return await self.exec("unpublish", *options)

    async def update(self, *options: Options) -> None:
        return await self.exec("update", *options)

    async def version(self, *options: Options) -> None:
        return await self.exec("version", *options)

    async def whoami(self, *options: Options) -> None:
        return await self.exec("whoami", *options)


npm = NpmCommand()
