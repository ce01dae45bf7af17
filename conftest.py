from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent

root_path = str(ROOT_DIR)
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def _ensure_test_env() -> None:
    # Keep settings independent of a developer's local .env / environment.
    os.environ["DOCKER_CONTAINER"] = "true"
    for key in ("I18N_DICT_FILE", "I18N_DEFAULT_LANGUAGE", "I18N_LOG_LEVEL"):
        os.environ.pop(key, None)


_ensure_test_env()


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")
