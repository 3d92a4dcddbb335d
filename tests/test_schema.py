"""Tests for the schema initializer."""

import pytest
from sqlalchemy import inspect

from markermap.core.config import Settings
from markermap.core.errors import InitializationError
from markermap.db.schema import initialize
from markermap.db.session import DatabaseHandle
from markermap.services.data_access import DataAccess


@pytest.mark.asyncio
async def test_initialize_creates_tables(db_handle):
    """Test both tables exist after initialization."""
    async with db_handle.engine.connect() as conn:
        tables = await conn.run_sync(lambda c: inspect(c).get_table_names())

    assert "Marker" in tables
    assert "Image" in tables


@pytest.mark.asyncio
async def test_initialize_creates_column_names(db_handle):
    """Test column names match the on-disk layout."""
    async with db_handle.engine.connect() as conn:
        marker_cols = await conn.run_sync(lambda c: inspect(c).get_columns("Marker"))
        image_cols = await conn.run_sync(lambda c: inspect(c).get_columns("Image"))

    assert [c["name"] for c in marker_cols] == ["id", "latitude", "longitude"]
    assert [c["name"] for c in image_cols] == ["id", "uri", "markerId"]


@pytest.mark.asyncio
async def test_image_foreign_key_cascades(db_handle):
    """Test Image.markerId references Marker.id with ON DELETE CASCADE."""
    async with db_handle.engine.connect() as conn:
        fks = await conn.run_sync(lambda c: inspect(c).get_foreign_keys("Image"))

    assert len(fks) == 1
    assert fks[0]["referred_table"] == "Marker"
    assert fks[0]["constrained_columns"] == ["markerId"]
    assert fks[0]["options"].get("ondelete") == "CASCADE"


@pytest.mark.asyncio
async def test_foreign_keys_enforced_on_every_connection(db_handle):
    """Test PRAGMA foreign_keys is on for connections opened later."""
    async with db_handle.engine.connect() as conn:
        result = await conn.exec_driver_sql("PRAGMA foreign_keys")
        assert result.scalar() == 1


@pytest.mark.asyncio
async def test_initialize_is_idempotent(settings: Settings):
    """Test re-initializing an existing file keeps its rows."""
    handle = await initialize(settings)
    data_access = DataAccess(handle)
    marker_id = await data_access.add_marker(58.01, 56.23)
    await data_access.add_image(marker_id, "file://x.jpg")
    await data_access.close()

    handle = await initialize(settings)
    data_access = DataAccess(handle)
    try:
        markers = await data_access.get_markers()
        images = await data_access.get_images(marker_id)
    finally:
        await data_access.close()

    assert [m.id for m in markers] == [marker_id]
    assert [i.uri for i in images] == ["file://x.jpg"]


@pytest.mark.asyncio
async def test_initialize_fails_on_unusable_folder(tmp_path):
    """Test a data folder that cannot be created raises InitializationError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    settings = Settings(data_save_folder=str(blocker / "data"), db_file="test.db")

    with pytest.raises(InitializationError):
        await initialize(settings)


@pytest.mark.asyncio
async def test_initialize_fails_when_file_cannot_be_opened(tmp_path):
    """Test a database path that is a directory raises InitializationError."""
    (tmp_path / "test.db").mkdir()
    settings = Settings(data_save_folder=str(tmp_path), db_file="test.db")

    with pytest.raises(InitializationError):
        await initialize(settings)


@pytest.mark.asyncio
async def test_initialize_fails_without_foreign_keys(settings: Settings, monkeypatch):
    """Test a connection without FK enforcement is rejected and released."""
    monkeypatch.setattr(
        "markermap.db.session._enable_foreign_keys", lambda conn, record: None
    )
    disposed = []
    original_dispose = DatabaseHandle.dispose

    async def recording_dispose(self):
        disposed.append(self)
        await original_dispose(self)

    monkeypatch.setattr(DatabaseHandle, "dispose", recording_dispose)

    with pytest.raises(InitializationError, match="Foreign key enforcement"):
        await initialize(settings)

    assert len(disposed) == 1
