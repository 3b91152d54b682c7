"""Search state machine for the stop search form.

The form moves through idle -> loading -> success/failure. Every search gets a
request id, and a completion is only applied while the state is still loading
that same request. Completions for superseded requests are dropped, so a slow
answer can never overwrite the result of a newer search.
"""

from dataclasses import dataclass

from kr_bus_craft.domain.models.conversion_result import ConversionResult


@dataclass(frozen=True)
class Idle:
    """Nothing searched yet."""

    request_id: int = 0


@dataclass(frozen=True)
class Loading:
    """A resolution is in flight."""

    request_id: int
    stop_id: str


@dataclass(frozen=True)
class Success:
    """The last search resolved and converted."""

    request_id: int
    result: ConversionResult


@dataclass(frozen=True)
class Failure:
    """The last search failed with a user-displayable message."""

    request_id: int
    message: str


SearchState = Idle | Loading | Success | Failure


def start_search(state: SearchState, stop_id: str) -> Loading | None:
    """Begin a new search, or return None when the input is blank."""
    normalized = stop_id.strip()
    if not normalized:
        return None
    return Loading(request_id=state.request_id + 1, stop_id=normalized)


def _is_current(state: SearchState, request_id: int) -> bool:
    return isinstance(state, Loading) and state.request_id == request_id


def complete_search(state: SearchState, request_id: int, result: ConversionResult) -> SearchState:
    """Apply a successful completion if it belongs to the current request."""
    if not _is_current(state, request_id):
        return state
    return Success(request_id=request_id, result=result)


def fail_search(state: SearchState, request_id: int, message: str) -> SearchState:
    """Apply a failed completion if it belongs to the current request."""
    if not _is_current(state, request_id):
        return state
    return Failure(request_id=request_id, message=message)
