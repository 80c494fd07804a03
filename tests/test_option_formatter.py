from shellopts import build, build_args, command
from shellopts.modules.command.enums.option_kind_enum import OptionKind
from shellopts.modules.command.option_formatter import OptionFormatter, default_transform, format_options


def test_default_transform_short_and_long_boolean_flags():
    assert default_transform({"h": True}) == ["-h"]
    assert default_transform({"rm": True}) == ["--rm"]


def test_default_transform_skips_false_and_falsy_values():
    assert default_transform({"rm": False, "name": None, "tag": "", "count": 0}) == []


def test_default_transform_value_flags_keep_mapping_order():
    flags = {"name": "value", "n": "v", "port": 8080, "h": True}
    assert default_transform(flags) == ["--name", "value", "-n", "v", "--port", "8080", "-h"]


def test_build_mixed_strings_and_flags():
    assert build("docker", "run", {"rm": True}, "hello-world") == "docker run --rm hello-world"


def test_build_from_list():
    result = build("docker", ["run", {"h": True}, {"name": "value"}, {"n": "v"}, "hello-world"])
    assert result == "docker run -h --name value -n v hello-world"


def test_build_multiple_flags_in_one_mapping():
    result = build("docker", "run", {"h": True, "name": "value", "n": "v"}, "hello-world")
    assert result == "docker run -h --name value -n v hello-world"


def test_build_args():
    assert build_args("run", {"rm": True}, "hello-world") == ["run", "--rm", "hello-world"]


def test_build_without_options_keeps_trailing_separator():
    assert build("ls") == "ls "


def test_control_keys_are_taken_from_first_option_only():
    npm = command("npm", {"cwd": "/home/user/workspace/my-npm-project", "printCommand": False})
    assert npm.build({"printCommand": True, "quiet": True, "cwd": "/some/path"}, "install") == "npm install"
    assert npm.build("install", {"printCommand": True}) == "npm install --printCommand"


def test_format_options_extracts_control_keys():
    formatted = format_options([{"cwd": "/tmp/project", "quiet": True, "printCommand": "yes", "force": True}])
    assert formatted.args == ["--force"]
    assert formatted.cwd == "/tmp/project"
    assert formatted.quiet is True
    assert formatted.print_command is False


def test_format_options_leaves_control_keys_unset_when_absent():
    formatted = format_options(["install"])
    assert formatted.cwd is None
    assert formatted.quiet is None
    assert formatted.print_command is None


def test_format_options_does_not_mutate_first_option():
    first = {"cwd": "/tmp", "quiet": True, "v": True}
    format_options([first])
    assert first == {"cwd": "/tmp", "quiet": True, "v": True}


def test_control_keys_inside_a_list_are_ordinary_flags():
    assert build_args([{"quiet": True, "cwd": "/tmp"}]) == ["--quiet", "--cwd", "/tmp"]


def test_unsupported_options_are_ignored():
    assert build_args("run", 42, None, ["a", 3.5, {"x": True}, object()], "b") == ["run", "a", "-x", "b"]


def test_classify():
    assert OptionFormatter.classify("run") == OptionKind.TEXT
    assert OptionFormatter.classify({"rm": True}) == OptionKind.FLAGS
    assert OptionFormatter.classify(["run"]) == OptionKind.SEQUENCE
    assert OptionFormatter.classify(("run",)) == OptionKind.SEQUENCE
    assert OptionFormatter.classify(7) == OptionKind.UNKNOWN


def _equals_transform(fallback):
    def transform(flags):
        args = []
        for name, value in flags.items():
            if value and isinstance(value, str):
                args.append(f"--{name}={value}")
            else:
                args.extend(fallback({name: value}))
        return args
    return transform


def test_custom_transform_applies_to_first_mapping():
    my_cmd = command("mycmd", {"quiet": True})
    my_cmd.transform = _equals_transform(my_cmd.transform)
    assert my_cmd.build({"name": "value"}) == "mycmd --name=value"


def test_custom_transform_does_not_see_control_keys():
    seen = []

    def transform(flags):
        seen.append(dict(flags))
        return []

    my_cmd = command("mycmd")
    my_cmd.transform = transform
    my_cmd.build({"cwd": "/tmp", "quiet": False, "printCommand": True, "v": True})
    assert seen == [{"v": True}]


def test_custom_transform_is_not_used_for_later_mappings():
    my_cmd = command("mycmd")
    my_cmd.transform = _equals_transform(default_transform)
    result = my_cmd.build({"name": "value"}, {"name": "value"}, [{"tag": "x"}])
    assert result == "mycmd --name=value --name value --tag x"
