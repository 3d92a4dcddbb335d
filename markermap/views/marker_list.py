"""Map screen: every marker as a pin, tap to add, tap a pin for details."""

from typing import Callable

from loguru import logger

from markermap.core.config import MapConfig, Settings, get_map_config, get_settings
from markermap.schemas.map import MapPressEvent
from markermap.schemas.marker import MarkerDTO
from markermap.schemas.view import MapRender, Pin
from markermap.services.data_access import DataAccess
from markermap.services.operation import attempt
from markermap.ui.alerts import Alert, AlertPresenter
from markermap.ui.feed import MarkerFeed
from markermap.ui.navigation import Navigator


class MarkerListView:
    """Map screen holding its own copy of the marker list.

    Usage:
        screen = await navigator.navigate(MarkerListView.route_name)
        await screen.on_map_press(MapPressEvent(coordinate=...))
    """

    route_name = "Map"

    def __init__(
        self,
        data_access: DataAccess,
        navigator: Navigator,
        alerts: AlertPresenter,
        feed: MarkerFeed,
        settings: Settings | None = None,
        map_config: MapConfig | None = None,
    ):
        self.data_access = data_access
        self.navigator = navigator
        self.alerts = alerts
        self.feed = feed
        self.settings = settings or get_settings()
        self.region = (map_config or get_map_config()).initial_region(self.settings)

        self.markers: list[MarkerDTO] = []
        self.loading = False
        self.error: str | None = None
        self._unsubscribe: Callable[[], None] | None = None

    async def mount(self) -> None:
        """Subscribe to the feed and load every marker."""
        self._unsubscribe = self.feed.subscribe(self._on_markers)
        await self.refresh()

    async def unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    async def focus(self) -> None:
        """Back from another screen; the list was already patched through the feed."""
        if self.settings.refresh_list_on_focus:
            await self.refresh()

    async def refresh(self) -> bool:
        """Re-fetch the full list from the store and publish it."""
        self.loading = True
        result = await attempt("get_markers", self.data_access.get_markers())
        self.loading = False

        if not result.ok:
            self.error = str(result.error)
            self.alerts.show(Alert("Error", "Could not load markers"))
            return False

        self.error = None
        self.set_markers(result.value)
        return True

    async def on_map_press(self, event: MapPressEvent) -> int | None:
        """Add a marker where the map was tapped, then reload the list."""
        coordinate = event.coordinate
        result = await attempt(
            "add_marker",
            self.data_access.add_marker(coordinate.latitude, coordinate.longitude),
        )
        if not result.ok:
            self.alerts.show(Alert("Error", "Could not add marker"))
            return None

        logger.info(f"New marker added with id {result.value}")
        # Always reload; the stored row is the source of truth
        await self.refresh()
        return result.value

    async def on_marker_press(self, marker: MarkerDTO) -> None:
        """Open the detail screen for ``marker``."""
        await self.navigator.navigate(
            "MarkerDetail",
            marker=marker,
            markers=list(self.markers),
            set_markers=self.set_markers,
        )

    def set_markers(self, markers: list[MarkerDTO]) -> None:
        """Replace the list this screen renders."""
        self.feed.publish(markers)

    def _on_markers(self, markers: list[MarkerDTO]) -> None:
        self.markers = markers

    def render(self) -> MapRender:
        return MapRender(
            region=self.region,
            pins=[Pin(marker_id=m.id, coordinate=m.coordinate) for m in self.markers],
            loading=self.loading,
            error=self.error,
        )
