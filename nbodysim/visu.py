"""Display interfaces for the spheres representing the bodies."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["SpheresVisu", "NoSpheresVisu"]


class SpheresVisu(ABC):
    """Something that shows the bodies and reports user input."""

    @abstractmethod
    def refresh_display(self) -> None:
        """Draw the current state."""

    @abstractmethod
    def window_should_close(self) -> bool:
        """Whether the user asked to close the display."""

    @abstractmethod
    def pressed_space_bar(self) -> bool:
        """Whether the space bar is pressed."""

    @abstractmethod
    def pressed_page_up(self) -> bool:
        """Whether the page-up key is pressed."""

    @abstractmethod
    def pressed_page_down(self) -> bool:
        """Whether the page-down key is pressed."""


class NoSpheresVisu(SpheresVisu):
    """A display that shows nothing and never receives input.

    It only counts how many times it was asked to refresh.
    """

    def __init__(self) -> None:
        self.frames = 0

    def refresh_display(self) -> None:
        self.frames += 1

    def window_should_close(self) -> bool:
        return False

    def pressed_space_bar(self) -> bool:
        return False

    def pressed_page_up(self) -> bool:
        return False

    def pressed_page_down(self) -> bool:
        return False