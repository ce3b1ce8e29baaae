"""Tests for the shared rich renderables."""

import pytest
from rich.console import Console

from autoname_cleaner.managers.cleanup_controller import CleanupController, CleanupState
from autoname_cleaner.managers.removal_manager import ContainerRemover
from autoname_cleaner.models.containers import CleanupOutcome
from autoname_cleaner.ui.rendering import (
    candidate_table,
    outcome_text,
    session_view,
    status_text,
    truncate,
    window_indicator,
)
from autoname_cleaner.utils.exceptions import (
    AutonameCleanerError,
    CleanupError,
    DockerAPIError,
    RemovalError,
)
from conftest import FakeRuntimeClient, summary


def render(renderable) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def controller(make_ctx):
    candidates = tuple(summary(f"id{i}", f"/zen_tu{i}", image=f"img{i}") for i in range(30))
    return CleanupController(candidates, ContainerRemover(make_ctx(FakeRuntimeClient())))


def test_truncate_keeps_short_values():
    assert truncate("alpine:latest", 40) == "alpine:latest"
    assert truncate("x" * 40, 40) == "x" * 40


def test_truncate_shortens_long_values():
    image = "registry.example.com/team/project/service:2024-01-01-abcdef"

    short = truncate(image, 40)

    assert len(short) == 40
    assert short.endswith("...")
    assert short.startswith(image[:37])


def test_candidate_table_shows_index_name_and_image():
    """Test that rows carry 1-based index, primary name and truncated image."""
    long_image = "registry.example.com/" + "a" * 60
    candidates = (
        summary("id1", "/inspiring_franklin", image="alpine:latest"),
        summary("id2", "/agitated_wescoff7", image=long_image),
    )

    output = render(candidate_table(candidates))

    assert "#" in output and "Name" in output and "Image" in output
    assert "inspiring_franklin" in output
    assert "agitated_wescoff7" in output
    assert "alpine:latest" in output
    assert truncate(long_image, 40) in output
    assert long_image not in output
    assert candidates[1].image == long_image


def test_candidate_table_window_keeps_absolute_numbers(controller):
    output = render(candidate_table(controller.candidates, 10, 12))

    assert "zen_tu10" in output and "zen_tu11" in output
    assert "zen_tu9 " not in output
    assert "11" in output and "12" in output


def test_window_indicator_only_when_windowed(controller):
    """Test the (start-end of total) hint."""
    controller.set_window_size(40)
    assert window_indicator(controller) is None

    controller.set_window_size(10)
    controller.scroll_down()
    indicator = window_indicator(controller)

    assert indicator is not None
    assert indicator.plain == "(2-11 of 30) Use ↑↓ to scroll"


def test_status_text_per_state(controller):
    assert "y/Enter to delete" in status_text(controller).plain

    controller.cancel()

    assert status_text(controller).plain == "Operation cancelled."


@pytest.mark.asyncio
async def test_status_text_while_deleting_and_done(controller):
    removal = controller.confirm()
    assert controller.state is CleanupState.DELETING
    assert "Deleting containers" in status_text(controller).plain

    controller.handle_result(await removal)

    assert status_text(controller).plain == "✓ Removed 30 container(s) successfully."


def test_outcome_text_with_errors():
    """Test that a partial success names the failing container."""
    failure = RemovalError("id1", "inspiring_franklin", DockerAPIError("permission denied"))
    outcome = CleanupOutcome(removed_names=["agitated_wescoff7"], error=CleanupError([failure]))

    text = outcome_text(outcome).plain

    assert text.startswith("Removed 1 container(s).")
    assert "Completed with errors" in text
    assert "inspiring_franklin" in text
    assert "permission denied" in text


def test_session_view_renders_visible_rows_only(controller):
    controller.set_window_size(5)

    output = render(session_view(controller))

    assert "zen_tu0" in output and "zen_tu4" in output
    assert "zen_tu5" not in output
    assert "(1-5 of 30)" in output
    assert "y/Enter to delete" in output


def test_status_text_done_without_outcome_is_an_error(controller):
    controller.state = CleanupState.DONE

    with pytest.raises(AutonameCleanerError):
        status_text(controller)
