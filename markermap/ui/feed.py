"""Process-wide observable marker list shared by the screens."""

from typing import Callable, Iterable

from markermap.schemas.marker import MarkerDTO

Listener = Callable[[list[MarkerDTO]], None]


class MarkerFeed:
    """Latest marker list plus the screens listening to it.

    Every listener receives its own list object, so no two screens ever
    hold the same list.
    """

    def __init__(self):
        self._markers: list[MarkerDTO] = []
        self._listeners: list[Listener] = []

    def snapshot(self) -> list[MarkerDTO]:
        return list(self._markers)

    def publish(self, markers: Iterable[MarkerDTO]) -> None:
        """Replace the list and notify every listener."""
        self._markers = list(markers)
        for listener in list(self._listeners):
            listener(list(self._markers))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns the function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
