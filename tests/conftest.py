import pytest

from pi3gpio.config import Pi3GPIOConfig
from pi3gpio.errors import PinReadError
from pi3gpio.gpio import GPIOHandle, PinMode
from pi3gpio.pins import PinState


class FakeGPIO(GPIOHandle):
    """Simulated board, pin states survive across commands."""

    def __init__(self):
        self.states: dict[int, PinState] = {}
        self.modes: dict[int, PinMode] = {}
        self.calls: list[tuple] = []
        self.failing_pins: set[int] = set()
        self.closed = False

    def set_mode(self, pin: int, mode: PinMode) -> None:
        self.calls.append(("set_mode", pin, mode))
        self.modes[pin] = mode

    def read(self, pin: int) -> PinState:
        self.calls.append(("read", pin))
        if pin in self.failing_pins:
            raise PinReadError(pin, "simulated failure")
        return self.states.get(pin, PinState.LOW)

    def write(self, pin: int, state: PinState) -> None:
        self.calls.append(("write", pin, state))
        self.states[pin] = state

    def close(self) -> None:
        self.closed = True
        if self.revert_on_close:
            self.modes.clear()


@pytest.fixture
def gpio():
    return FakeGPIO()


@pytest.fixture
def open_gpio(mocker, gpio):
    return mocker.patch("pi3gpio.gpio.setup.open_gpio", return_value=gpio)


@pytest.fixture
def config():
    return Pi3GPIOConfig()
