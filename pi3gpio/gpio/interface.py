from abc import ABC, abstractmethod

from pi3gpio.gpio.types import PinMode
from pi3gpio.pins import PinState


class GPIOHandle(ABC):
    """Access to the GPIO controller for the duration of one command."""

    revert_on_close: bool = True

    def set_release_policy(self, revert_on_close: bool) -> None:
        """Choose whether pins go back to their default state on `close`."""
        self.revert_on_close = revert_on_close

    @abstractmethod
    def set_mode(self, pin: int, mode: PinMode) -> None:
        """:raises PinModeError"""

    @abstractmethod
    def read(self, pin: int) -> PinState:
        """:raises PinReadError"""

    @abstractmethod
    def write(self, pin: int, state: PinState) -> None:
        """:raises PinWriteError"""

    @abstractmethod
    def close(self) -> None: ...
