"""End-to-end tests running ``python -m schematic`` in a subprocess."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).parent
PROJECT_ROOT = TESTS_DIR.parent


def run_schematic(*args, generator="fake_generators:TitleGenerator", cwd=None):
    env = {k: v for k, v in os.environ.items() if not k.upper().startswith("SCHEMATIC_")}
    env["PYTHONPATH"] = os.pathsep.join([str(PROJECT_ROOT), str(TESTS_DIR)])
    env["SCHEMATIC_GENERATOR"] = generator
    return subprocess.run(
        [sys.executable, "-m", "schematic", *args],
        capture_output=True,
        env=env,
        cwd=cwd,
    )


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


def test_generates_code(schema_file, workdir):
    result = run_schematic(str(schema_file), cwd=workdir)

    assert result.returncode == 0
    assert result.stdout == b"package exampleapi\n\n// Code generated by schematic.\n"
    assert result.stderr == b""


def test_output_is_reproducible(schema_file, workdir):
    first = run_schematic(str(schema_file), cwd=workdir)
    second = run_schematic(str(schema_file), cwd=workdir)

    assert first.stdout == second.stdout


def test_missing_argument(workdir):
    result = run_schematic(cwd=workdir)

    assert result.returncode != 0
    assert result.stderr == b"schematic: missing schema file\n"
    assert result.stdout == b""


def test_missing_file(workdir):
    result = run_schematic(str(workdir / "absent.json"), cwd=workdir)

    assert result.returncode != 0
    assert b"No such file or directory" in result.stderr
    assert result.stdout == b""


def test_generator_crash_has_no_traceback(schema_file, workdir):
    result = run_schematic(
        str(schema_file), generator="fake_generators:crash", cwd=workdir
    )

    assert result.returncode != 0
    assert result.stderr == b"list index out of range\n"
    assert b"Traceback" not in result.stderr
    assert result.stdout == b""
