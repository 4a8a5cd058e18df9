import logging
from typing import Sequence

from pi3gpio.config import Pi3GPIOConfig
from pi3gpio.errors import MissingCommand, MissingPin, PinError, UnknownCommand
from pi3gpio.gpio import GPIOHandle, gpio_setup
from pi3gpio.help import GET_COMMAND, HELP_COMMAND, SET_COMMAND, help_text
from pi3gpio.pins import (
    ALL_PINS,
    AllPins,
    PinState,
    parse_pin_number,
    parse_pin_selector,
    parse_pin_state,
    validate_pin,
)

logger = logging.getLogger(__name__)


def handle_command(args: Sequence[str], config: Pi3GPIOConfig) -> None:
    """Run the command named by the first argument.

    :raises Pi3GPIOError: on any fatal error, user or hardware.
    """
    if not args:
        raise MissingCommand()
    command, *tokens = args
    logger.debug("running %r with %r", command, tokens)
    if command == HELP_COMMAND:
        print(help_text(config))
    elif command == SET_COMMAND:
        set_pins(tokens)
    elif command == GET_COMMAND:
        read_pins(tokens)
    else:
        raise UnknownCommand(command)


def read_pins(tokens: Sequence[str]) -> None:
    """Read and print the state of the pins, in the given order.

    A pin that cannot be read is reported and does not stop the command.
    The first pin token is checked before GPIO is opened, so an invalid token
    is reported even where GPIO memory is not accessible.
    """
    if not tokens:
        raise MissingPin()
    first, *others = tokens
    selector = parse_pin_selector(first)
    with gpio_setup() as gpio:
        if isinstance(selector, AllPins):
            for pin in ALL_PINS:
                _read_pin(gpio, pin)
            return
        _read_pin(gpio, validate_pin(selector, first))
        for token in others:
            _read_pin(gpio, validate_pin(parse_pin_number(token), token))


def _read_pin(gpio: GPIOHandle, pin: int) -> None:
    try:
        gpio.set_mode(pin, "input")
        state = gpio.read(pin)
    except PinError as e:
        logger.debug("%s", e)
        print(f"Could not read state of pin {pin}")
    else:
        print(f"Pin {pin} = {state}")


def set_pins(tokens: Sequence[str]) -> None:
    """Drive the pins to the requested state, in the given order.

    Pins keep their state once the program exits.
    """
    state = parse_pin_state(tokens[0] if tokens else None)
    if len(tokens) < 2:
        raise MissingPin()
    first, *others = tokens[1:]
    selector = parse_pin_selector(first)
    with gpio_setup(revert_on_close=False) as gpio:
        if isinstance(selector, AllPins):
            for pin in ALL_PINS:
                _set_pin(gpio, pin, state)
            return
        _set_pin(gpio, validate_pin(selector, first), state)
        for token in others:
            _set_pin(gpio, validate_pin(parse_pin_number(token), token), state)


def _set_pin(gpio: GPIOHandle, pin: int, state: PinState) -> None:
    gpio.set_mode(pin, "output")
    gpio.write(pin, state)
    print(f"Set pin {pin} to {state}")
