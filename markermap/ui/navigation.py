"""Stack navigator between screens.

Route params are handed to the screen factory as-is; the navigator never
inspects or copies them.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

from loguru import logger


class Screen(Protocol):
    """A screen managed by the navigator."""

    async def mount(self) -> None:
        """Called once after the screen is pushed."""
        ...

    async def unmount(self) -> None:
        """Called once after the screen is popped."""
        ...

    async def focus(self) -> None:
        """Called when the screen becomes visible again after a pop."""
        ...


ScreenFactory = Callable[..., Screen]


@dataclass
class Route:
    """One entry on the navigation stack."""

    name: str
    screen: Screen
    params: dict[str, Any] = field(default_factory=dict)


class Navigator:
    """Push/pop navigation over named routes."""

    def __init__(self):
        self._factories: dict[str, ScreenFactory] = {}
        self._stack: list[Route] = []

    def register(self, name: str, factory: ScreenFactory) -> None:
        """Register the factory that builds the screen for ``name``."""
        self._factories[name] = factory

    @property
    def current(self) -> Screen | None:
        return self._stack[-1].screen if self._stack else None

    @property
    def routes(self) -> list[str]:
        """Route names from bottom to top."""
        return [route.name for route in self._stack]

    async def navigate(self, name: str, **params: Any) -> Screen:
        """Build, push and mount the screen registered under ``name``."""
        if name not in self._factories:
            raise KeyError(f"Unknown route: {name}")
        screen = self._factories[name](**params)
        self._stack.append(Route(name=name, screen=screen, params=params))
        try:
            await screen.mount()
        except Exception:
            self._stack.pop()
            raise
        logger.debug(f"Navigated to {name}")
        return screen

    async def go_back(self) -> None:
        """Pop and unmount the top screen, then refocus the one below."""
        if len(self._stack) < 2:
            logger.warning("Cannot go back from the root screen")
            return
        route = self._stack.pop()
        await route.screen.unmount()
        logger.debug(f"Left {route.name}")
        await self._stack[-1].screen.focus()

    async def reset(self) -> None:
        """Unmount every screen, top first."""
        while self._stack:
            route = self._stack.pop()
            await route.screen.unmount()
