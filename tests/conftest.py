from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from handoff.logging import get_logger
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture(autouse=True)
def _reset_handoff_logger() -> Iterator[None]:
    """Drop handlers installed by CLI tests so later tests never log to a closed stream."""
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def knowledge_project(project_builder: ProjectBuilder) -> ProjectBuilder:
    """Project with a populated knowledge base describing a small web service."""
    project_builder.assumptions(
        """
        - Email validation uses a regex pattern to check the address format before saving users
        - Passwords are hashed with bcrypt using 10 salt rounds for password security
        """
    )
    project_builder.knowledge(
        {
            "architecture.md": """
            # Architecture

            The service exposes REST endpoints through Express routes.
            Product records are cached in memory for fast lookups.
            """,
        }
    )
    return project_builder
