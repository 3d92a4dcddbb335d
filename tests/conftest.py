"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio

from markermap.core.config import MapConfig, Settings
from markermap.core.errors import StorageError
from markermap.db.schema import initialize
from markermap.db.session import DatabaseHandle
from markermap.main import MarkerMapApp
from markermap.schemas.marker import MarkerDTO
from markermap.services.data_access import DataAccess
from markermap.ui.alerts import LoggingAlertPresenter
from markermap.ui.picker import PickerOptions, PickerResult


class FakeImagePicker:
    """Picker returning queued results (or raising queued exceptions)."""

    def __init__(self):
        self.results: list[PickerResult | Exception] = []
        self.calls: list[PickerOptions] = []

    async def pick(self, options: PickerOptions) -> PickerResult:
        self.calls.append(options)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def fail_with_storage_error(operation: str):
    """Async stand-in for a DAL method that always fails."""

    async def failing(*args, **kwargs):
        raise StorageError(operation, RuntimeError("disk I/O error"))

    return failing


def count_calls(monkeypatch, obj, name: str) -> list[tuple]:
    """Wrap ``obj.name`` so every call is recorded; returns the call log."""
    calls: list[tuple] = []
    original = getattr(obj, name)

    async def wrapper(*args, **kwargs):
        calls.append(args)
        return await original(*args, **kwargs)

    monkeypatch.setattr(obj, name, wrapper)
    return calls


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway database file."""
    return Settings(data_save_folder=str(tmp_path / "data"), db_file="test.db")


@pytest.fixture
def map_config() -> MapConfig:
    return MapConfig()


@pytest_asyncio.fixture(scope="function")
async def db_handle(settings: Settings) -> AsyncGenerator[DatabaseHandle, None]:
    """Initialized database handle."""
    handle = await initialize(settings)
    yield handle
    await handle.dispose()


@pytest_asyncio.fixture(scope="function")
async def data_access(db_handle: DatabaseHandle) -> AsyncGenerator[DataAccess, None]:
    """Data access layer over the test database."""
    yield DataAccess(db_handle)


@pytest.fixture
def alerts() -> LoggingAlertPresenter:
    return LoggingAlertPresenter()


@pytest.fixture
def picker() -> FakeImagePicker:
    return FakeImagePicker()


@pytest_asyncio.fixture(scope="function")
async def app(
    settings: Settings,
    map_config: MapConfig,
    picker: FakeImagePicker,
    alerts: LoggingAlertPresenter,
) -> AsyncGenerator[MarkerMapApp, None]:
    """Started application showing the map screen."""
    application = MarkerMapApp(
        picker, alerts=alerts, settings=settings, map_config=map_config
    )
    await application.start()
    yield application
    await application.stop()


@pytest_asyncio.fixture(scope="function")
async def sample_markers(data_access: DataAccess) -> list[MarkerDTO]:
    """Three stored markers A, B, C."""
    await data_access.add_marker(58.0105, 56.2294)
    await data_access.add_marker(58.0201, 56.2411)
    await data_access.add_marker(57.9987, 56.2175)
    return await data_access.get_markers()


@pytest_asyncio.fixture(scope="function")
async def seeded_app(
    sample_markers: list[MarkerDTO],
    settings: Settings,
    map_config: MapConfig,
    picker: FakeImagePicker,
    alerts: LoggingAlertPresenter,
) -> AsyncGenerator[MarkerMapApp, None]:
    """Started application whose map screen loaded the sample markers."""
    application = MarkerMapApp(
        picker, alerts=alerts, settings=settings, map_config=map_config
    )
    await application.start()
    yield application
    await application.stop()
