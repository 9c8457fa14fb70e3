"""Example script tests: run examples/demo.py as a subprocess."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from hmacpw import verify_password

from tests.conftest import TEST_SECRET_KEY


@pytest.fixture
def run_demo(project_root: Path):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(project_root / "src"), env.get("PYTHONPATH")])
    )
    env.pop("HMACPW_SECRET_KEY", None)

    def _run(*args: str, **env_overrides: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, str(project_root / "examples" / "demo.py"), *args],
            capture_output=True,
            text=True,
            env={**env, **env_overrides},
            timeout=30,
        )

    return _run


def _blocks(stdout: str) -> dict:
    """Parse '→ label' headers followed by JSON bodies."""
    out, label, body = {}, None, []
    for line in stdout.splitlines():
        if line.startswith("→ "):
            if label:
                out[label] = json.loads("\n".join(body))
            label, body = line[2:], []
        elif label and line != "Done.":
            body.append(line)
    if label:
        out[label] = json.loads("\n".join(body))
    return out


def test_demo_hash_and_verify(run_demo):
    result = run_demo("--secret-key", TEST_SECRET_KEY)
    assert result.returncode == 0, result.stderr
    blocks = _blocks(result.stdout)
    record = blocks["hash"]["record"]
    assert blocks["hash"]["algorithm"] == "hmac_sha256"
    assert blocks["verify (correct password)"] == {"matched": True}
    assert blocks["verify (wrong password)"] == {"matched": False}
    assert verify_password("mySecurePassword123", record, TEST_SECRET_KEY)


def test_demo_reads_key_from_environment(run_demo):
    result = run_demo(HMACPW_SECRET_KEY="env-key")
    assert result.returncode == 0, result.stderr
    record = _blocks(result.stdout)["hash"]["record"]
    assert verify_password("mySecurePassword123", record, "env-key")


def test_demo_info(run_demo):
    result = run_demo("--info")
    assert result.returncode == 0, result.stderr
    assert _blocks(result.stdout)["algorithm_info"]["algorithm"] == "hmac_sha256"


def test_demo_reports_errors(run_demo):
    result = run_demo("--salt-length", "8")
    assert result.returncode == 1
    assert result.stderr.startswith("Error: ")


def test_demo_verify_foreign_record(run_demo):
    result = run_demo("--verify", "md5$AAAA$BBBB")
    assert result.returncode == 1
    assert "Unsupported algorithm" in result.stderr
