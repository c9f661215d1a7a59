"""Integration tests: E2E via subprocess with a scripted operator on stdin."""

import csv
import os
import subprocess
import sys

import pytest

MAIN_PY = os.path.join(os.path.dirname(__file__), "..", "main.py")
METADATA = "Alice\nMyApp\nv1.2.3\nSmoke test\nDeviceA\n"


def _run(stdin: str, *args: str) -> subprocess.CompletedProcess:
    """Run main.py with given stdin and args, return CompletedProcess."""
    return subprocess.run(
        [sys.executable, MAIN_PY, *args],
        input=stdin,
        capture_output=True,
        text=True,
    )


def _artifacts(log_dir):
    names = sorted(os.listdir(log_dir))
    return [os.path.join(log_dir, n) for n in names]


class TestFullSession:
    def test_writes_both_reports(self, tmp_path):
        result = _run(METADATA + "bug: crash on boot\ngood: boots fine otherwise\nend\n",
                      "--log-dir", str(tmp_path))
        assert result.returncode == 0, result.stderr
        assert "Logs successfully saved!" in result.stdout

        csv_path, txt_path = _artifacts(tmp_path)
        assert csv_path.endswith("_MyApp_log.csv")
        assert txt_path.endswith("_MyApp_log.txt")

        with open(txt_path, encoding="utf-8") as f:
            text = f.read()
        assert "[OBSERVATION]\t[BUG]\tcrash on boot" in text
        assert "GOOD      : 1" in text

        with open(csv_path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert ["Tag", "Count"] in rows
        assert rows[-2:] == [["BUG", "1"], ["GOOD", "1"]]

    def test_immediate_end(self, tmp_path):
        result = _run(METADATA + "end\n", "-d", str(tmp_path))
        assert result.returncode == 0, result.stderr
        assert len(_artifacts(tmp_path)) == 2

    def test_no_banner_flag(self, tmp_path):
        result = _run(METADATA + "end\n", "-d", str(tmp_path), "--no-banner")
        assert result.returncode == 0
        assert "TAG OPTIONS" not in result.stdout

    def test_env_log_dir(self, tmp_path):
        env = dict(os.environ, SESSION_LOG_DIR=str(tmp_path / "env"))
        result = subprocess.run(
            [sys.executable, MAIN_PY],
            input=METADATA + "end\n",
            capture_output=True,
            text=True,
            env=env,
        )
        assert result.returncode == 0, result.stderr
        assert len(os.listdir(tmp_path / "env")) == 2


class TestFailures:
    def test_input_ends_early(self, tmp_path):
        result = _run(METADATA + "bug: never finished\n", "-d", str(tmp_path))
        assert result.returncode == 1
        assert "no reports written" in result.stderr
        assert os.listdir(tmp_path) == []

    def test_unwritable_log_dir(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        result = _run(METADATA + "end\n", "-d", str(blocker / "logs"))
        assert result.returncode == 1
        assert "Error" in result.stderr

    def test_version(self):
        result = _run("", "--version")
        assert result.returncode == 0
        assert "1.0.0" in result.stdout


class TestUndecodableInput:
    @pytest.mark.parametrize("locale", ["C.UTF-8", "C"])
    def test_invalid_utf8_line_is_kept(self, tmp_path, locale):
        env = dict(os.environ, LC_ALL=locale)
        env.pop("PYTHONIOENCODING", None)
        result = subprocess.run(
            [sys.executable, MAIN_PY, "-d", str(tmp_path)],
            input=METADATA.encode() + b"bug: bad \xff byte\nend\n",
            capture_output=True,
            env=env,
        )
        assert result.returncode == 0, result.stderr
        csv_path, txt_path = _artifacts(tmp_path)
        with open(txt_path, "rb") as f:
            assert b"bad \xff byte" in f.read()
        with open(csv_path, "rb") as f:
            assert b'"BUG","bad \xff byte"' in f.read()
