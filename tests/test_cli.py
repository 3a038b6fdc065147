import pytest

from stand.cli import build_parser, main


def test_cli_shows_help(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "A CLI tool for explicit environment variable management" in capsys.readouterr().out


def test_cli_shows_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "stand" in capsys.readouterr().out


def test_cli_parses_init_command(capsys):
    assert main(["init"]) == 1
    assert capsys.readouterr().out == "Init command called with force: false\n"


def test_cli_init_force(capsys):
    assert main(["init", "--force"]) == 1
    assert "force: true" in capsys.readouterr().out


def test_cli_parses_shell_command(capsys):
    assert main(["shell", "dev"]) == 1
    assert capsys.readouterr().out == "Shell command called with environment: dev\n"


def test_cli_parses_list_command(capsys):
    assert main(["list"]) == 1
    assert capsys.readouterr().out == "List command called\n"


def test_cli_exec_lists_command(capsys):
    assert main(["exec", "dev", "echo", "hi"]) == 1
    assert capsys.readouterr().out == (
        'Exec command called with environment: dev and command: ["echo", "hi"]\n'
    )


def test_cli_show_values_flag(capsys):
    assert main(["show", "prod", "-v"]) == 1
    assert capsys.readouterr().out == (
        "Show command called with environment: prod and values: true\n"
    )


def test_cli_set_and_unset(capsys):
    assert main(["set", "NAME", "value"]) == 1
    assert main(["unset", "NAME"]) == 1
    assert capsys.readouterr().out == (
        "Set command called with name: NAME and value: value\n"
        "Unset command called with name: NAME\n"
    )


def test_cli_requires_a_command():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_cli_rejects_missing_argument():
    with pytest.raises(SystemExit) as info:
        main(["switch"])
    assert info.value.code == 2


def test_parser_reads_switch_environment():
    args = build_parser().parse_args(["switch", "staging"])
    assert (args.command, args.environment) == ("switch", "staging")