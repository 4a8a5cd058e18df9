from pi3gpio.gpio.interface import GPIOHandle
from pi3gpio.gpio.setup import gpio_setup
from pi3gpio.gpio.types import PinMode

__all__ = ["GPIOHandle", "PinMode", "gpio_setup"]
