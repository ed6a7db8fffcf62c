"""
Tests for the mcp/skill launchers
"""

import pytest
from unittest.mock import patch, Mock

from mcpskill.core.exceptions import BinaryNotFoundError
from mcpskill.runtime import launcher
from mcpskill.runtime.launcher import run_binary


class TestRunBinary:

    def test_passes_arguments_and_exit_code(self, test_config, temp_binary_dir):
        (temp_binary_dir / "skill").write_bytes(b"#!")

        with patch("mcpskill.runtime.launcher.subprocess.run", return_value=Mock(returncode=3)) as run:
            code = run_binary("skill", ["list", "--json"], test_config)

        assert code == 3
        argv = run.call_args.args[0]
        assert argv[0].endswith("skill")
        assert argv[1:] == ["list", "--json"]

    def test_missing_binary(self, test_config):
        with pytest.raises(BinaryNotFoundError):
            run_binary("mcp", [], test_config)


class TestEntryPoints:

    def test_missing_binary_exits_one(self, test_config, capsys):
        with patch("mcpskill.runtime.launcher.InstallerConfig.from_env", return_value=test_config), \
             patch("sys.argv", ["mcp", "serve"]):
            code = launcher.main_mcp()

        assert code == 1
        assert "binary not found" in capsys.readouterr().err

    def test_skill_forwards_argv(self, test_config, temp_binary_dir):
        (temp_binary_dir / "skill").write_bytes(b"#!")

        with patch("mcpskill.runtime.launcher.InstallerConfig.from_env", return_value=test_config), \
             patch("mcpskill.runtime.launcher.subprocess.run", return_value=Mock(returncode=0)) as run, \
             patch("sys.argv", ["skill", "install", "demo"]):
            code = launcher.main_skill()

        assert code == 0
        assert run.call_args.args[0][1:] == ["install", "demo"]
