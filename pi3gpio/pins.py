import re
from dataclasses import dataclass
from enum import Enum

from pi3gpio.errors import InvalidPinToken, InvalidState, MissingState

# BCM numbering.
LAST_PIN_NUMBER = 27
PIN_NUMBERS = range(LAST_PIN_NUMBER + 1)

ALL_PINS_TOKEN = "all"
HIGH_STATE_TOKEN = "high"
LOW_STATE_TOKEN = "low"

# Unsigned 8-bit integer, as typed on the command line.
_RE_UINT8 = re.compile(r"\+?[0-9]+")
_UINT8_MAX = 255


class PinState(Enum):
    LOW = 0
    HIGH = 1

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class AllPins:
    def __iter__(self):
        return iter(PIN_NUMBERS)


ALL_PINS = AllPins()

PinSelector = int | AllPins


def parse_pin_number(token: str) -> int:
    """Parse a pin token as an unsigned 8-bit integer.

    The result is not checked against the pins of the board, see `validate_pin`.
    """
    if not _RE_UINT8.fullmatch(token):
        raise InvalidPinToken(token, "not a pin number")
    # Leading zeros are allowed in any number, only the significant digits are bounded.
    digits = token.removeprefix("+").lstrip("0") or "0"
    if len(digits) > len(str(_UINT8_MAX)) or int(digits) > _UINT8_MAX:
        raise InvalidPinToken(token, "not a pin number")
    return int(digits)


def parse_pin_selector(token: str) -> PinSelector:
    if token == ALL_PINS_TOKEN:
        return ALL_PINS
    return parse_pin_number(token)


def validate_pin(pin: int, token: str | None = None) -> int:
    """:param token: as typed by the user, used in the error message."""
    if pin not in PIN_NUMBERS:
        raise InvalidPinToken(
            token if token is not None else str(pin),
            f"BCM pins are between 0 and {LAST_PIN_NUMBER}",
        )
    return pin


def parse_pin_state(token: str | None) -> PinState:
    match token:
        case None:
            raise MissingState()
        case "high":
            return PinState.HIGH
        case "low":
            return PinState.LOW
        case _:
            raise InvalidState(token)
