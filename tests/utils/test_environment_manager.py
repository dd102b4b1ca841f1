import importlib
import logging
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from randsource.utils import EnvironmentManager, EnvironmentVariables

REPO_ROOT = Path(__file__).resolve().parents[2]

environment_module = importlib.import_module("randsource.utils.EnvironmentManager")


@pytest.fixture
def clean_env(monkeypatch):
    """Fixture removing the known variables from the environment."""
    for env_var in EnvironmentVariables:
        monkeypatch.delenv(env_var.env_name, raising=False)
    return monkeypatch


@pytest.fixture
def env_file_dir(tmp_path):
    """Fixture for a working directory holding a .env file."""
    (tmp_path / ".env").write_text("RANDSOURCE_TEST_MARKER=1\nRAND_SOURCE=simple\n")
    return tmp_path


def _run_in_fresh_process(code: str, cwd: Path) -> str:
    env = {
        key: value
        for key, value in os.environ.items()
        if key not in ("RAND_SOURCE", "RAND_SEED", "RANDSOURCE_TEST_MARKER")
    }
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", code], cwd=cwd, env=env, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def test_defaults_when_unset(clean_env):
    assert EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE) == "crypto"
    assert EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED) is None


def test_override_default(clean_env):
    assert EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE, "mt32") == "mt32"
    assert EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED, 5) == 5


def test_reads_values(clean_env):
    clean_env.setenv("RAND_SOURCE", " simple ")
    clean_env.setenv("RAND_SEED", "-42")
    assert EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE) == "simple"
    assert EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED) == -42


def test_int_is_decimal_with_leading_zeros(clean_env):
    clean_env.setenv("RAND_SEED", "010")
    assert EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED) == 10


def test_blank_value_falls_back_to_default(clean_env):
    clean_env.setenv("RAND_SOURCE", "")
    assert EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE) == "crypto"


def test_invalid_int_logs_and_falls_back(clean_env, caplog):
    clean_env.setenv("RAND_SEED", "not-a-number")
    with caplog.at_level(logging.WARNING, logger="randsource.utils.EnvironmentManager"):
        assert EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED) is None
    assert "RAND_SEED" in caplog.text


def test_import_leaves_environment_untouched(env_file_dir):
    output = _run_in_fresh_process(
        "import os, randsource; "
        "print(os.environ.get('RANDSOURCE_TEST_MARKER'), os.environ.get('RAND_SOURCE'))",
        env_file_dir,
    )
    assert output == "None None"


def test_env_file_loaded_on_first_lookup(env_file_dir):
    output = _run_in_fresh_process(
        "from randsource.utils import EnvironmentManager, EnvironmentVariables; "
        "print(EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE))",
        env_file_dir,
    )
    assert output == "simple"


def test_env_file_loaded_once(clean_env):
    clean_env.setattr(EnvironmentManager, "_env_file_loaded", False)
    with patch.object(environment_module, "load_dotenv") as load:
        EnvironmentManager.get_string(EnvironmentVariables.RAND_SOURCE)
        EnvironmentManager.get_int(EnvironmentVariables.RAND_SEED)
    load.assert_called_once()
