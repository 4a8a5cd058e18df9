import contextlib
from typing import Iterator

from pi3gpio.gpio.interface import GPIOHandle
from pi3gpio.gpio.rpi import open_gpio


@contextlib.contextmanager
def gpio_setup(revert_on_close: bool = True) -> Iterator[GPIOHandle]:
    """Setup and release GPIO through context manager.

    Release always happens, pins are only reverted if `revert_on_close` is set.
    """
    handle = open_gpio()
    handle.set_release_policy(revert_on_close)
    try:
        yield handle
    finally:
        handle.close()
