"""Pytest fixtures for progression export tests."""

from pathlib import Path
from typing import Callable

import pytest

from progression.core.config import ProgressionSettings


BACKEND_FRAMEWORK = """\
---
title: "Backend Engineering"
sidebarTitle: "Engineer"
sidebarGroup: "Backend"
yaml: true
levels: 2
topics:
  - name: "Communication"
    title: "Communication"
    content:
      - level: 1
        criteria:
          - "Be kind"
          - "Shares context at Monzo"
        exampleCriteria:
          - criteria: "Writes Monzo docs"
            examples:
              - "Wrote the Monzo onboarding guide"
              - "Documented an API"
      - level: 2
        criteria:
          - "Mentors others"
  - name: "Technical skills"
    content:
      - level: 1
        exampleCriteria:
          - criteria: "Ships small changes"
            examples:
              - "Split a migration into steps"
---

# Backend

Body text is ignored.

---

Including anything after a horizontal rule.
"""


WEB_FRAMEWORK = """\
---
title: "Web Engineering"
sidebarTitle: "Engineer"
sidebarGroup: "Web"
levels: 1
topics:
  - name: "Communication"
    content:
      - level: 1
        exampleCriteria:
          - criteria: "Be kind"
            examples:
              - "Pair review"
---

# Web
"""


@pytest.fixture
def write_framework(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a framework document under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / "frameworks" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def backend_path(write_framework) -> Path:
    return write_framework("backend.md", BACKEND_FRAMEWORK)


@pytest.fixture
def web_path(write_framework) -> Path:
    return write_framework("web.md", WEB_FRAMEWORK)


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[..., ProgressionSettings]:
    """Return a helper that builds settings pointing at tmp_path."""

    def _make(*paths: Path, **overrides) -> ProgressionSettings:
        values = {
            "framework_paths": [str(p) for p in paths],
            "output_path": str(tmp_path / "out" / "export.csv"),
        }
        values.update(overrides)
        return ProgressionSettings(**values)

    return _make
