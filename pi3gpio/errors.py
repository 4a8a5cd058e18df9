class Pi3GPIOError(Exception):
    """Error stopping the current command, its message is shown to the user."""


class MissingCommand(Pi3GPIOError):
    def __init__(self):
        super().__init__("No command found!")


class UnknownCommand(Pi3GPIOError):
    def __init__(self, command: str):
        super().__init__(f"Unknown command {command!r}!")
        self.command = command


class MissingState(Pi3GPIOError):
    def __init__(self):
        super().__init__("State not found!")


class InvalidState(Pi3GPIOError):
    def __init__(self, state: str):
        super().__init__(f"State {state!r} is invalid!")
        self.state = state


class MissingPin(Pi3GPIOError):
    def __init__(self):
        super().__init__("Pin not found!")


class InvalidPinToken(Pi3GPIOError):
    """Raised for tokens that are not a pin number and for pins out of range."""

    def __init__(self, token: str, reason: str):
        super().__init__(f"Invalid pin {token!r}: {reason}!")
        self.token = token


class HandleUnavailable(Pi3GPIOError):
    def __init__(self, reason: str):
        super().__init__(f"Could not access GPIO memory! {reason}")


class PinError(Pi3GPIOError):
    """Hardware operation on a single pin failed."""

    def __init__(self, pin: int, action: str, reason: str):
        super().__init__(f"Could not {action} pin {pin}: {reason}")
        self.pin = pin


class PinModeError(PinError):
    def __init__(self, pin: int, reason: str):
        super().__init__(pin, "configure", reason)


class PinReadError(PinError):
    def __init__(self, pin: int, reason: str):
        super().__init__(pin, "read", reason)


class PinWriteError(PinError):
    def __init__(self, pin: int, reason: str):
        super().__init__(pin, "write", reason)
