from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Sequence, Union
from shellopts.modules.command.enums.option_kind_enum import OptionKind
from shellopts.modules.command.models.formatted_args import FormattedArgs
from shellopts.modules.log.simple_logger import get_logger

FlagMapping = Mapping[str, Union[str, int, float, bool, None]]
Option = Union[FlagMapping, str]
Options = Union[Option, Sequence[Option]]
TransformOption = Callable[[FlagMapping], List[str]]

logger = get_logger(__name__)


class OptionFormatter:
    """
    Flattens option items into an argument list.

    An option item is a flag mapping, a plain string, or a list of those:

        OptionFormatter.format(["run", {"rm": True}, "hello-world"]).args
        # -> ["run", "--rm", "hello-world"]

    Only a flag mapping given as the very first item may carry the control keys
    cwd, quiet and printCommand, and only that mapping goes through a custom transform.
    """

    @staticmethod
    def classify(option: Any) -> OptionKind:
        if isinstance(option, str):
            return OptionKind.TEXT
        if isinstance(option, Mapping):
            return OptionKind.FLAGS
        if isinstance(option, (list, tuple)):
            return OptionKind.SEQUENCE
        return OptionKind.UNKNOWN

    @staticmethod
    def default_transform(flags: FlagMapping) -> List[str]:
        """
        Convert a flag mapping to argument tokens, in mapping order.

        {"h": True} -> ["-h"], {"rm": True} -> ["--rm"], {"name": "value"} -> ["--name", "value"],
        {"n": "v"} -> ["-n", "v"].
        False and falsy non-boolean values (None, "", 0) produce nothing.
        """
        args = []
        for flag_name, flag_value in flags.items():
            # one-character keys take a single dash for values too, see DESIGN.md "Single-character value flags"
            flag = f"-{flag_name}" if len(flag_name) == 1 else f"--{flag_name}"
            if isinstance(flag_value, bool):
                if flag_value is True:
                    args.append(flag)
            elif flag_value:
                args.extend([flag, f"{flag_value}"])
        return args

    @staticmethod
    def format(options: Sequence[Options], transform: TransformOption = None) -> FormattedArgs:
        """
        Flatten every option item into a FormattedArgs.

        Args:
            options: Ordered option items
            transform: Flattening used for the first item's flag mapping (default_transform if None)

        Returns:
            FormattedArgs with args and any control keys found in the first item
        """
        transform = transform or OptionFormatter.default_transform
        formatted = FormattedArgs()

        for index, option in enumerate(options):
            kind = OptionFormatter.classify(option)
            if kind == OptionKind.SEQUENCE:
                for item in option:
                    item_kind = OptionFormatter.classify(item)
                    if item_kind == OptionKind.FLAGS:
                        formatted.args.extend(OptionFormatter.default_transform(item))
                    elif item_kind == OptionKind.TEXT:
                        formatted.args.append(item)
                    else:
                        logger.debug(f"Ignoring unsupported option {item!r} at position {index}")
            elif kind == OptionKind.FLAGS:
                if index == 0:
                    OptionFormatter._apply_first_option(formatted, option, transform)
                else:
                    formatted.args.extend(OptionFormatter.default_transform(option))
            elif kind == OptionKind.TEXT:
                formatted.args.append(option)
            else:
                logger.debug(f"Ignoring unsupported option {option!r} at position {index}")

        return formatted

    @staticmethod
    def _apply_first_option(formatted: FormattedArgs, option: FlagMapping, transform: TransformOption):
        """Pull the control keys out of the first flag mapping and flatten the rest with transform."""
        filtered: Dict[str, Any] = {}
        for flag_name, flag_value in option.items():
            if flag_name == "quiet":
                formatted.quiet = flag_value is True
            elif flag_name == "printCommand":
                formatted.print_command = flag_value is True
            elif flag_name == "cwd":
                formatted.cwd = None if flag_value is None else str(flag_value)
            else:
                filtered[flag_name] = flag_value
        formatted.args.extend(transform(filtered))


default_transform = OptionFormatter.default_transform
format_options = OptionFormatter.format
