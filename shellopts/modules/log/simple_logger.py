"""
Shared logging utilities for commands.
"""
import logging


class _CommandLoggerAdapter(logging.LoggerAdapter):
    """Prefixes every message with the command name, e.g. '[npm] Spawning npm install'."""

    def process(self, msg, kwargs):
        return f"[{self.extra['command']}] {msg}", kwargs


def get_logger(name, context=None):
    """
    Get a logger for a shellopts module.

    Args:
        name: Logger name, usually the module's __name__
        context: Optional dict; when it carries a 'command' key, messages are prefixed with it

    Returns:
        logging.Logger or logging.LoggerAdapter
    """
    logger = logging.getLogger(name)
    if context and "command" in context:
        return _CommandLoggerAdapter(logger, context)
    return logger
