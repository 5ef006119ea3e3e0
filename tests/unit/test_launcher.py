"""Tests for the pass-through launcher."""

from __future__ import annotations

import stat
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from rip import launcher
from rip.bootstrap.platform import PlatformKey
from rip.config.loader import ConfigError, RipConfig

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX shell scripts")

LINUX_X64 = PlatformKey(os="linux", arch="x64")


@pytest.fixture
def linux_platform():
    with patch("rip.launcher.detect_platform", return_value=LINUX_X64):
        yield LINUX_X64


def _write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


class TestBinaryPath:
    """Tests for binary path resolution."""

    def test_uses_install_root(self, tmp_path: Path, linux_platform) -> None:
        assert launcher.binary_path(tmp_path) == tmp_path / "bin" / "rip-linux-x64"

    def test_unknown_os_uses_generic_name(self, tmp_path: Path) -> None:
        with patch("rip.launcher.detect_platform", return_value=PlatformKey("sunos", "x64")):
            assert launcher.binary_path(tmp_path) == tmp_path / "bin" / "rip"

    def test_windows_name(self, tmp_path: Path) -> None:
        with patch("rip.launcher.detect_platform", return_value=PlatformKey("win32", "arm64")):
            assert launcher.binary_path(tmp_path) == tmp_path / "bin" / "rip.exe"

    def test_defaults_to_configured_root(self, tmp_path: Path, linux_platform) -> None:
        config = RipConfig(install_root=tmp_path / "custom")
        with patch("rip.launcher.load_config", return_value=config):
            assert launcher.binary_path() == tmp_path / "custom" / "bin" / "rip-linux-x64"

    def test_broken_config_falls_back_to_default(self, tmp_path: Path, linux_platform) -> None:
        with patch("rip.launcher.load_config", side_effect=ConfigError("bad yaml")):
            with patch("pathlib.Path.home", return_value=tmp_path):
                path = launcher.binary_path()
        assert path == tmp_path / ".rip" / "bin" / "rip-linux-x64"


class TestRunWithMockedProcess:
    """Tests for run() with a mocked child process."""

    def test_forwards_arguments_unmodified(self, tmp_path: Path, linux_platform) -> None:
        proc = MagicMock()
        proc.wait.return_value = 0
        argv = ["scan", "--path", "some dir", "--json", "-v", "--", "--help"]

        with patch("rip.launcher.subprocess.Popen", return_value=proc) as popen:
            code = launcher.run(argv, install_root=tmp_path)

        assert code == 0
        expected = [str(tmp_path / "bin" / "rip-linux-x64"), *argv]
        popen.assert_called_once_with(expected, shell=False)

    def test_does_not_redirect_stdio(self, tmp_path: Path, linux_platform) -> None:
        proc = MagicMock()
        proc.wait.return_value = 0
        with patch("rip.launcher.subprocess.Popen", return_value=proc) as popen:
            launcher.run([], install_root=tmp_path)

        kwargs = popen.call_args.kwargs
        assert "stdin" not in kwargs
        assert "stdout" not in kwargs
        assert "stderr" not in kwargs

    @pytest.mark.parametrize("code", [0, 1, 2, 42, 255])
    def test_returns_child_exit_code(self, tmp_path: Path, linux_platform, code: int) -> None:
        proc = MagicMock()
        proc.wait.return_value = code
        with patch("rip.launcher.subprocess.Popen", return_value=proc):
            assert launcher.run([], install_root=tmp_path) == code

    def test_signal_termination_maps_to_zero(self, tmp_path: Path, linux_platform) -> None:
        proc = MagicMock()
        proc.wait.return_value = -15
        with patch("rip.launcher.subprocess.Popen", return_value=proc):
            assert launcher.run([], install_root=tmp_path) == 0

    def test_keyboard_interrupt_keeps_waiting(self, tmp_path: Path, linux_platform) -> None:
        proc = MagicMock()
        proc.wait.side_effect = [KeyboardInterrupt(), 130]
        with patch("rip.launcher.subprocess.Popen", return_value=proc):
            assert launcher.run([], install_root=tmp_path) == 130
        assert proc.wait.call_count == 2

    def test_spawn_failure_returns_one(self, tmp_path: Path, linux_platform, capsys) -> None:
        error = FileNotFoundError(2, "No such file or directory")
        with patch("rip.launcher.subprocess.Popen", side_effect=error):
            code = launcher.run(["scan"], install_root=tmp_path)

        assert code == 1
        assert "Failed to start RIP: No such file or directory" in capsys.readouterr().err


class TestRunWithRealProcess:
    """Tests for run() spawning real child processes."""

    def test_missing_binary_exits_one(self, tmp_path: Path, linux_platform, capsys) -> None:
        assert launcher.run(["--version"], install_root=tmp_path) == 1
        assert "Failed to start RIP" in capsys.readouterr().err

    @posix_only
    @pytest.mark.parametrize("code", [0, 3, 255])
    def test_exit_code_fidelity(self, tmp_path: Path, linux_platform, code: int) -> None:
        _write_script(tmp_path / "bin" / "rip-linux-x64", f"exit {code}")
        assert launcher.run([], install_root=tmp_path) == code

    @posix_only
    def test_arguments_reach_child(self, tmp_path: Path, linux_platform) -> None:
        out = tmp_path / "args.txt"
        _write_script(
            tmp_path / "bin" / "rip-linux-x64",
            f'for a in "$@"; do printf "%s\\n" "$a" >> "{out}"; done',
        )

        code = launcher.run(["scan", "two words", "--json"], install_root=tmp_path)

        assert code == 0
        assert out.read_text().splitlines() == ["scan", "two words", "--json"]

    @posix_only
    def test_not_executable_binary_exits_one(self, tmp_path: Path, linux_platform) -> None:
        binary = tmp_path / "bin" / "rip-linux-x64"
        binary.parent.mkdir(parents=True)
        binary.write_text("#!/bin/sh\nexit 0\n")
        binary.chmod(0o644)
        assert launcher.run([], install_root=tmp_path) == 1


class TestMain:
    """Tests for the console entry point."""

    def test_main_exits_with_run_result(self) -> None:
        with patch.object(sys, "argv", ["rip", "scan", "--auto"]):
            with patch("rip.launcher.run", return_value=7) as run:
                with pytest.raises(SystemExit) as exc_info:
                    launcher.main()
        run.assert_called_once_with(["scan", "--auto"])
        assert exc_info.value.code == 7
