import logging
from types import ModuleType

from pi3gpio.errors import (
    HandleUnavailable,
    PinModeError,
    PinReadError,
    PinWriteError,
)
from pi3gpio.gpio.interface import GPIOHandle
from pi3gpio.gpio.types import PinMode
from pi3gpio.pins import PinState

logger = logging.getLogger(__name__)


def _load_gpio() -> ModuleType:
    # RPi.GPIO refuses to import outside of a Raspberry Pi.
    from RPi import GPIO

    return GPIO


class RPiGPIOHandle(GPIOHandle):
    """GPIO handle on top of RPi.GPIO, using BCM numbering."""

    def __init__(self, gpio: ModuleType):
        self._gpio = gpio

    def set_mode(self, pin: int, mode: PinMode) -> None:
        direction = self._gpio.IN if mode == "input" else self._gpio.OUT
        try:
            self._gpio.setup(pin, direction)
        except (RuntimeError, ValueError) as e:
            raise PinModeError(pin, str(e)) from e

    def read(self, pin: int) -> PinState:
        try:
            return PinState.HIGH if self._gpio.input(pin) else PinState.LOW
        except (RuntimeError, ValueError) as e:
            raise PinReadError(pin, str(e)) from e

    def write(self, pin: int, state: PinState) -> None:
        level = self._gpio.HIGH if state is PinState.HIGH else self._gpio.LOW
        try:
            self._gpio.output(pin, level)
        except (RuntimeError, ValueError) as e:
            raise PinWriteError(pin, str(e)) from e

    def close(self) -> None:
        if self.revert_on_close:
            logger.debug("reverting pins to their default state")
            self._gpio.cleanup()
        else:
            logger.debug("leaving pins configured")


def open_gpio() -> RPiGPIOHandle:
    """:raises HandleUnavailable if GPIO memory cannot be accessed."""
    try:
        gpio = _load_gpio()
        gpio.setwarnings(False)
        gpio.setmode(gpio.BCM)
    except (ImportError, RuntimeError) as e:
        raise HandleUnavailable(str(e)) from e
    logger.debug("opened GPIO handle")
    return RPiGPIOHandle(gpio)
