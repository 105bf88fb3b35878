"""Tests for the logictree command-line interface."""

import pytest
import tomlkit

from logictree import __version__
from logictree.cli import create_parser, main


class TestParser:
    def test_mcp_serve_transport(self):
        args = create_parser().parse_args(["mcp", "serve", "--transport", "sse"])
        assert args.command == "mcp"
        assert args.mcp_action == "serve"
        assert args.transport == "sse"

    def test_transport_defaults_to_config(self):
        args = create_parser().parse_args(["mcp", "serve"])
        assert args.transport is None


class TestCommands:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "logictree" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.strip() == f"logictree {__version__}"

    def test_config_show_is_toml(self, tmp_path, monkeypatch, capsys):
        monkeypatch.delenv("DISABLE_TREE_LOGGING", raising=False)
        monkeypatch.setenv("LOGICTREE_SERVER_NAME", "analyst")

        assert main(["--directory", str(tmp_path), "config", "show"]) == 0
        data = tomlkit.parse(capsys.readouterr().out).unwrap()

        assert data["server"]["name"] == "analyst"
        assert data["logging"]["color"] in ("auto", "always", "never")

    def test_config_path_without_file(self, tmp_path, capsys):
        assert main(["--directory", str(tmp_path), "config", "path"]) == 1
        assert "No .logictree.toml found" in capsys.readouterr().out

    def test_config_path_with_file(self, tmp_path, capsys):
        (tmp_path / ".logictree.toml").write_text("[server]\n")

        assert main(["--directory", str(tmp_path), "config", "path"]) == 0
        assert capsys.readouterr().out.strip().endswith(".logictree.toml")

    def test_invalid_config_reports_error(self, tmp_path, capsys):
        (tmp_path / ".logictree.toml").write_text('[logging]\ncolor = "rainbow"\n')

        assert main(["--directory", str(tmp_path), "config", "show"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_mcp_without_action(self, capsys):
        from logictree.mcp import MCP_AVAILABLE

        code = main(["mcp"])
        assert code == 1
        if MCP_AVAILABLE:
            assert "Usage: logictree mcp serve" in capsys.readouterr().out

    def test_completion_script_for_shell(self, capsys):
        pytest.importorskip("argcomplete")

        assert main(["completion", "--shell", "bash"]) == 0
        assert "logictree" in capsys.readouterr().out

    def test_completion_instructions(self, capsys):
        pytest.importorskip("argcomplete")

        assert main(["completion"]) == 0
        assert "register-python-argcomplete logictree" in capsys.readouterr().out
