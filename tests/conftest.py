# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


SAMPLE_MEMO = """## Control Overview

| Section | Content |
| --- | --- |
| Control Name | FIN-001 |
| Conclusion Summary | Effective |

Testing was performed over the full population.

- Obtained the user listing
- Inspected approvals

---

### Test Sheet

| Test Attribute | Test Attribute Description | Tickmark | Testing Notes | Reference |
| --- | --- | --- | --- | --- |
| A | Approval exists | **Pass** | Approved by CFO | WP-1 |
| B | Timely review | Exception noted | Late by 2 days | WP-2 |"""


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() & the config env var to an isolated temp directory
    fake_home = tmp_path / "fake_home"
    config_dir = fake_home / ".auditmemo"
    config_dir.mkdir(parents=True)

    config_data = {
        "data_dir": "data",
        "memo_filename": "memo.md",
        "base_dir": str(tmp_path / ".auditmemo"),
        "history_dirname": "history",
        "theme": "slate",
        "show_ids": True,
        "enforce_policy": True,
        "history_limit": 0,
        "dev_mode": False,
    }
    config_file = config_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("AUDITMEMO_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated config
    from auditmemo.config.settings import settings_manager

    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from auditmemo.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def sample_memo_text():
    return SAMPLE_MEMO


@pytest.fixture
def memo_file(tmp_path):
    # Write the sample memo to an isolated file w/ trailing newline
    path = tmp_path / "memo.md"
    path.write_text(SAMPLE_MEMO + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_doc(sample_memo_text):
    from auditmemo.core.parser import parse

    return parse(sample_memo_text)
