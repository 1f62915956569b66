"""Growth state of the reviews list and the scroll trigger that extends it."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_PAGE_LIMIT, LOAD_DEBOUNCE_INTERVAL, SCREENS_TO_LOAD_NEXT_PAGE


@dataclass
class PaginationState:
    """Offset bookkeeping plus the in-flight gate and debounce timestamp."""

    offset: int = 0
    limit: int = DEFAULT_PAGE_LIMIT
    more_available: bool = True
    in_flight: bool = False
    last_trigger_time: float = float("-inf")

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")
        if self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")

    @property
    def can_request(self) -> bool:
        return self.more_available and not self.in_flight


class PaginationController:
    """Decide whether a scroll position should fetch the next page.

    Scroll events arrive far more often than pages can be served, so a
    trigger is accepted only when the end of the content is close enough,
    more pages may exist, no fetch is in flight and the debounce interval has
    elapsed since the last evaluation that passed the debounce check.
    """

    def __init__(
        self,
        state: PaginationState,
        *,
        screens_to_load_next_page: float = SCREENS_TO_LOAD_NEXT_PAGE,
        debounce_interval: float = LOAD_DEBOUNCE_INTERVAL,
    ) -> None:
        self._state = state
        self._screens_to_load_next_page = float(screens_to_load_next_page)
        self._debounce_interval = float(debounce_interval)

    @property
    def state(self) -> PaginationState:
        return self._state

    @staticmethod
    def distance_to_end(content_height: float, viewport_height: float, target_offset_y: float) -> float:
        """Return how far the bottom of the viewport will be from the content end."""
        return content_height - viewport_height - target_offset_y

    def trigger_distance(self, viewport_height: float) -> float:
        return viewport_height * self._screens_to_load_next_page

    def should_trigger_load(
        self,
        distance_to_end: float,
        viewport_height: float,
        now: Optional[float] = None,
    ) -> bool:
        """Return ``True`` when the next page should be requested.

        The debounce timestamp is refreshed as soon as the interval check
        passes, even if the in-flight gate or the distance check rejects
        the trigger afterwards.
        """

        if now is None:
            now = time.monotonic()
        state = self._state
        if now - state.last_trigger_time <= self._debounce_interval:
            return False
        state.last_trigger_time = now

        if state.in_flight or not state.more_available:
            return False
        return distance_to_end <= self.trigger_distance(viewport_height)


__all__ = ["PaginationState", "PaginationController"]
