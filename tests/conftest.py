"""Shared test fixtures for obsidian-quarto."""

from datetime import date

import pytest

from obsidian_quarto.config.models import OutputConfig, QuartoConfig


SAMPLE_NOTE = """\
---
title: Weekly Review
tags: [review, weekly]
---
# Weekly Review

%% private reminder: ask about budget %%
Progress this week, see [[Project Plan]].

> [!warning] Deadline
> Report due Friday.
> Ask for help early.

```dataview
LIST FROM #project
```
"""


@pytest.fixture
def sample_note() -> str:
    return SAMPLE_NOTE


@pytest.fixture
def fixed_date() -> date:
    return date(2024, 3, 5)


@pytest.fixture
def sample_config():
    return QuartoConfig()


@pytest.fixture
def output_config(tmp_path):
    return OutputConfig(directory=str(tmp_path / "out"))


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no user-global config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
    return tmp_path
