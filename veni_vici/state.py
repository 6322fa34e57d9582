"""Viewer state container.

All session state the page needs lives in one immutable ViewerState, and
every change goes through reduce(state, event).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from .bans import EMPTY_BAN_LIST, toggle
from .models import ArtworkRecord, BanCategory, BanList, Selected, SelectionResult


@dataclass(frozen=True)
class ViewerState:
    current: ArtworkRecord | None = None
    history: tuple[ArtworkRecord, ...] = ()
    ban_list: BanList = EMPTY_BAN_LIST
    loading: bool = False
    error: str | None = None
    refresh_count: int = 0  # Completed refreshes, successful or not


@dataclass(frozen=True)
class RefreshStarted:
    pass


@dataclass(frozen=True)
class RefreshCompleted:
    result: SelectionResult


@dataclass(frozen=True)
class BanToggled:
    category: BanCategory
    value: str


@dataclass(frozen=True)
class HistoryCleared:
    pass


Event = Union[RefreshStarted, RefreshCompleted, BanToggled, HistoryCleared]


def reduce(state: ViewerState, event: Event) -> ViewerState:
    """Return the state that follows ``event``."""
    if isinstance(event, RefreshStarted):
        return replace(state, loading=True, error=None)

    if isinstance(event, RefreshCompleted):
        # Whichever refresh completes last wins
        result = event.result
        done = replace(state, loading=False, refresh_count=state.refresh_count + 1)
        if isinstance(result, Selected):
            return replace(
                done,
                current=result.record,
                history=state.history + (result.record,),
                error=None,
            )
        return replace(done, error=result.message)

    if isinstance(event, BanToggled):
        return replace(state, ban_list=toggle(state.ban_list, event.category, event.value))

    if isinstance(event, HistoryCleared):
        return replace(state, history=())

    raise TypeError(f"Unknown event: {event!r}")
