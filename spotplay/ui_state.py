"""The application's UI state: page history, popup and input."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from spotplay.model import TracksId
from spotplay.ui_page import BrowsingPageType, ContextPage, LibraryPage, PageState
from spotplay.ui_popup import PopupState, SearchPopup

T = TypeVar("T")


def is_match(text: str, query: str) -> bool:
    """Whether every space-separated word of ``query`` occurs in ``text``."""
    return all(word in text for word in query.split(" "))


@dataclass
class UIState:
    """The application's UI state."""

    is_running: bool = True
    theme: Any = None
    input_key_sequence: list[Any] = field(default_factory=list)
    history: list[PageState] = field(default_factory=lambda: [LibraryPage()])
    popup: PopupState | None = None
    # (x, y, width, height) of the progress bar, used to handle mouse seeking
    playback_progress_bar_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    last_cover_image_render_info: tuple[str, float] | None = None

    def current_page(self) -> PageState:
        """Return the page on top of the history."""
        if not self.history:
            raise RuntimeError("History must not be empty")
        return self.history[-1]

    def create_new_page(self, page: PageState) -> None:
        """Push ``page`` onto the history and close any popup."""
        self.history.append(page)
        self.popup = None

    def create_new_radio_page(self, uri: str) -> None:
        """Open a page of recommendations seeded by ``uri``."""
        self.create_new_page(
            ContextPage(
                id=None,
                context_page_type=BrowsingPageType(
                    TracksId(f"radio:{uri}", "Recommendations")
                ),
                state=None,
            )
        )

    def has_focused_popup(self) -> bool:
        """Whether a popup that takes the focus is open; a search popup does not."""
        return self.popup is not None and not isinstance(self.popup, SearchPopup)

    def search_filtered_items(self, items: Sequence[T]) -> list[T]:
        """Return ``items``, filtered by the query of an open search popup."""
        if isinstance(self.popup, SearchPopup):
            query = self.popup.query.lower()
            return [t for t in items if is_match(str(t).lower(), query)]
        return list(items)