from pathlib import Path
from typing import Generator
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.config import Settings, get_settings
from src.main import app as main_app


@pytest.fixture
def test_database_url(tmp_path: Path) -> str:
    db_path: Path = tmp_path / "test_tasks.db"
    return f"sqlite:///{db_path}"


@pytest.fixture
def test_settings(test_database_url: str) -> Settings:
    return Settings(
        DATABASE_URL=test_database_url,
        TASK_TIMEZONE="Asia/Tokyo",
        OTEL_ENABLED=False,
    )


@pytest.fixture
def test_client(
    test_settings: Settings, mocker: MockerFixture
) -> Generator[TestClient, None, None]:
    mocker.patch("src.main.settings", test_settings)
    main_app.dependency_overrides[get_settings] = lambda: test_settings

    with TestClient(main_app) as client:
        yield client

    main_app.dependency_overrides.clear()
