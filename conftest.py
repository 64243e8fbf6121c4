# SPDX-FileCopyrightText: 2025 vsss contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so `import vsss` works without installing
#   • audit trail off and redirected to a per-test temporary directory

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _isolate_audit(tmp_path, monkeypatch):
    """Keep audit artefacts out of the home directory."""
    monkeypatch.setenv("VSSS_AUDIT_DIR", str(tmp_path / "audit"))
    monkeypatch.delenv("VSSS_AUDIT", raising=False)
    yield
