"""
Unit tests for the devtools-mcp command line.

run_command is patched wherever a launch would happen; npm is disabled with
--no-update so nothing touches the network.
"""

import json
from unittest.mock import patch

import pytest

from devtools_mcp import __version__
from devtools_mcp.cli import arguments_parse, launcher_build, main
from devtools_mcp.launcher.launcher import Command
from devtools_mcp.settings.resolver import SERVER_ID


def _settings_file(tmp_path, settings):
  path = tmp_path / "settings.json"
  path.write_text(json.dumps({"context_servers": {SERVER_ID: {"settings": settings}}}))
  return str(path)


@pytest.mark.unit
class TestArgumentsParse:
  def test_defaults(self):
    args = arguments_parse([])
    assert args.project is None
    assert args.settings is None
    assert args.no_update is False
    assert args.print_args is False
    assert args.print_schema is False

  def test_print_modes_are_exclusive(self):
    with pytest.raises(SystemExit):
      arguments_parse(["--print-args", "--print-schema"])

  def test_version(self, capsys):
    with pytest.raises(SystemExit) as exc_info:
      arguments_parse(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out

  def test_launcher_build(self, tmp_path):
    launcher = launcher_build(arguments_parse(["--work-dir", str(tmp_path), "--node", "/opt/node", "--no-update"]))
    assert launcher.config.work_dir == str(tmp_path)
    assert launcher.config.node_path == "/opt/node"
    assert launcher.config.auto_update is False


@pytest.mark.unit
class TestMain:
  def test_print_schema(self, capsys):
    assert main(["--print-schema"]) == 0
    schema = json.loads(capsys.readouterr().out)
    assert "headless" in schema["properties"]

  def test_print_args_from_settings_file(self, tmp_path, capsys):
    path = _settings_file(tmp_path, {"headless": True, "viewport": "800x600", "extra_args": ["--x"]})
    assert main(["--settings", path, "--print-args"]) == 0
    assert json.loads(capsys.readouterr().out) == ["--headless", "--viewport", "800x600", "--x"]

  def test_print_args_from_project(self, project_factory, capsys):
    project = project_factory({"isolated": True})
    assert main(["--project", str(project), "--print-args"]) == 0
    assert json.loads(capsys.readouterr().out) == ["--isolated"]

  def test_print_args_invalid_settings_file(self, tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert main(["--settings", str(path), "--print-args"]) == 0
    assert json.loads(capsys.readouterr().out) == []

  def test_launch(self, tmp_path, node_binary):
    path = _settings_file(tmp_path, {"headless": True})
    with patch("devtools_mcp.cli.run_command", return_value=0) as run:
      code = main(["--settings", path, "--no-update", "--node", node_binary, "--work-dir", str(tmp_path)])

    assert code == 0
    command = run.call_args.args[0]
    assert isinstance(command, Command)
    assert command.command == node_binary
    assert command.args[-1] == "--headless"

  def test_exit_code_propagates(self, tmp_path, node_binary):
    with patch("devtools_mcp.cli.run_command", return_value=7):
      code = main(["--settings", str(tmp_path / "absent.json"), "--no-update", "--node", node_binary, "--work-dir", str(tmp_path)])
    assert code == 7

  @pytest.mark.parametrize("mode", [["--print-args"], []])
  def test_vanished_working_directory_returns_1(self, mode):
    with (
      patch("devtools_mcp.cli.os.getcwd", side_effect=FileNotFoundError("gone")),
      patch("devtools_mcp.cli.run_command") as run,
    ):
      assert main(["--no-update", *mode]) == 1
    run.assert_not_called()

  def test_explicit_project_skips_cwd_lookup(self, project_factory, capsys):
    project = project_factory({"headless": True})
    with patch("devtools_mcp.cli.os.getcwd", side_effect=FileNotFoundError("gone")):
      assert main(["--project", str(project), "--print-args"]) == 0
    assert json.loads(capsys.readouterr().out) == ["--headless"]

  def test_launch_failure_returns_1(self, tmp_path):
    with patch("devtools_mcp.cli.run_command") as run:
      code = main(["--no-update", "--node", str(tmp_path / "missing-node"), "--work-dir", str(tmp_path), "--project", str(tmp_path)])
    assert code == 1
    run.assert_not_called()
