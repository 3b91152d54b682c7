"""Tests for SearchFormatter."""

import pytest

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.adapters.web.formatters import SearchFormatter
from kr_bus_craft.domain.models import (
    ConversionResult,
    GridCoords,
    SourceCitation,
    StopRecord,
)
from kr_bus_craft.domain.models.search_state import Failure, Idle, Loading, Success


@pytest.fixture
def formatter() -> SearchFormatter:
    """Formatter with default display settings."""
    return SearchFormatter(AppConfig(_env_file=None, title="KR-BUS-CRAFT", theme="dark"))


@pytest.fixture
def result() -> ConversionResult:
    """A resolved stop near City Hall."""
    return ConversionResult(
        stop=StopRecord(
            id="01141",
            name="City Hall (시청)",
            latitude=37.5665,
            longitude=126.978,
            city="Seoul",
        ),
        coords=GridCoords(x=651, y=64, z=-1314, origin_name="Seoul Station (서울역)"),
        sources=(SourceCitation(uri="https://example.com/stop", title="Bus info"),),
    )


def _active_flags(assigns: dict) -> list[str]:
    return [k for k in ("is_idle", "is_loading", "has_error", "has_result") if assigns[k]]


def test_format_coordinate_uses_six_decimals() -> None:
    """Given a coordinate, when formatting, then six decimals are shown."""
    assert SearchFormatter.format_coordinate(37.5665) == "37.566500"
    assert SearchFormatter.format_coordinate(-0.1234567) == "-0.123457"


def test_idle_state_shows_feature_cards(formatter: SearchFormatter) -> None:
    """Given the initial state, when building assigns, then only the idle view is active."""
    assigns = formatter.build_assigns(Idle())

    assert _active_flags(assigns) == ["is_idle"]
    assert assigns["show_feature_cards"] is True
    assert assigns["title"] == "KR-BUS-CRAFT"
    assert assigns["theme"] == "dark"
    assert len(assigns["feature_cards"]) == 3


def test_loading_state_hides_feature_cards(formatter: SearchFormatter) -> None:
    """Given a running search, when building assigns, then the loading view is active."""
    assigns = formatter.build_assigns(Loading(request_id=1, stop_id="01141"), "01141")

    assert _active_flags(assigns) == ["is_loading"]
    assert assigns["show_feature_cards"] is False
    assert assigns["stop_id_input"] == "01141"


def test_failure_state_shows_message(formatter: SearchFormatter) -> None:
    """Given a failed search, when building assigns, then the message is shown verbatim."""
    message = "Failed to fetch bus stop data. Please check the ID."

    assigns = formatter.build_assigns(Failure(request_id=2, message=message), "99999")

    assert _active_flags(assigns) == ["has_error"]
    assert assigns["error_message"] == message
    assert assigns["show_feature_cards"] is True


def test_success_state_formats_result(
    formatter: SearchFormatter, result: ConversionResult
) -> None:
    """Given a successful search, when building assigns, then the result card data is set."""
    assigns = formatter.build_assigns(Success(request_id=1, result=result), "01141")

    assert _active_flags(assigns) == ["has_result"]
    assert assigns["show_feature_cards"] is False
    card = assigns["result"]
    assert card["stop_name"] == "City Hall (시청)"
    assert card["stop_city"] == "Seoul"
    assert card["latitude"] == "37.566500"
    assert card["longitude"] == "126.978000"
    assert (card["x"], card["y"], card["z"]) == ("651", "64", "-1314")
    assert card["teleport_command"] == "/tp @s 651 64 -1314"
    assert card["origin_name"] == "Seoul Station (서울역)"
    assert card["sources"] == [{"uri": "https://example.com/stop", "title": "Bus info"}]
    assert card["has_sources"] is True


def test_success_without_sources_or_city(formatter: SearchFormatter) -> None:
    """Given a result without citations or city, when formatting, then those fields are empty."""
    bare = ConversionResult(
        stop=StopRecord(id="1", name="Stop", latitude=37.5547, longitude=126.9706),
        coords=GridCoords(x=0, y=64, z=0, origin_name="Origin"),
    )

    card = formatter.format_result(bare)

    assert card["stop_city"] == ""
    assert card["sources"] == []
    assert card["has_sources"] is False
