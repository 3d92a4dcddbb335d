"""
Marker Map - application shell

Opens the database, wires the data access layer into both screens and
shows the map screen.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from loguru import logger

from markermap.core.config import MapConfig, Settings, get_settings
from markermap.core.errors import InitializationError
from markermap.db.schema import initialize
from markermap.services.data_access import DataAccess
from markermap.ui.alerts import Alert, AlertPresenter, LoggingAlertPresenter
from markermap.ui.feed import MarkerFeed
from markermap.ui.navigation import Navigator
from markermap.ui.picker import ImagePicker
from markermap.views.marker_detail import MarkerDetailView
from markermap.views.marker_list import MarkerListView


class MarkerMapApp:
    """Application root: owns the data access layer and the navigator."""

    def __init__(
        self,
        picker: ImagePicker,
        alerts: AlertPresenter | None = None,
        settings: Settings | None = None,
        map_config: MapConfig | None = None,
    ):
        self.picker = picker
        self.alerts = alerts or LoggingAlertPresenter()
        self.settings = settings or get_settings()
        self.map_config = map_config or MapConfig(self.settings.map_cfg_path)

        self.data_access: DataAccess | None = None
        self.feed = MarkerFeed()
        self.navigator = Navigator()

    async def start(self) -> MarkerListView:
        """Initialize the database and open the map screen.

        Raises:
            InitializationError: the database is unusable; a fatal alert
                has already been shown.
        """
        logger.info(f"Starting {self.settings.app_name}...")
        try:
            handle = await initialize(self.settings)
        except InitializationError:
            self.alerts.show(
                Alert("Error", "Database is not initialized", fatal=True)
            )
            raise

        self.data_access = DataAccess(handle)
        self._register_routes(self.data_access)
        screen = await self.navigator.navigate(MarkerListView.route_name)
        logger.info(f"{self.settings.app_name} started")
        return screen

    async def stop(self) -> None:
        """Close every screen and release the database."""
        logger.info(f"Shutting down {self.settings.app_name}...")
        await self.navigator.reset()
        if self.data_access:
            await self.data_access.close()
            self.data_access = None
        logger.info(f"{self.settings.app_name} stopped")

    def _register_routes(self, data_access: DataAccess) -> None:
        self.navigator.register(
            MarkerListView.route_name,
            lambda **params: MarkerListView(
                data_access,
                self.navigator,
                self.alerts,
                self.feed,
                settings=self.settings,
                map_config=self.map_config,
            ),
        )
        self.navigator.register(
            MarkerDetailView.route_name,
            lambda **params: MarkerDetailView(
                data_access,
                self.navigator,
                self.alerts,
                self.picker,
                self.feed,
                **params,
            ),
        )


@asynccontextmanager
async def app_lifespan(
    picker: ImagePicker,
    alerts: AlertPresenter | None = None,
    settings: Settings | None = None,
) -> AsyncGenerator[MarkerMapApp, None]:
    """Run the application for the duration of the context."""
    app = MarkerMapApp(picker, alerts=alerts, settings=settings)
    await app.start()
    try:
        yield app
    finally:
        await app.stop()
