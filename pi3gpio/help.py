from pi3gpio.config import Pi3GPIOConfig
from pi3gpio.pins import (
    ALL_PINS_TOKEN,
    HIGH_STATE_TOKEN,
    LAST_PIN_NUMBER,
    LOW_STATE_TOKEN,
)

HELP_COMMAND = "help"
SET_COMMAND = "set"
GET_COMMAND = "get"

SNAP_NAME = "pi3gpio"


def help_text(config: Pi3GPIOConfig) -> str:
    app = config.app_call
    lines = [
        f"SYNTAX: sudo {app} command [state] [pins]",
        "\tcommand: ",
        f"\t\t{HELP_COMMAND}\tprints the help text",
        f"\t\t{SET_COMMAND}\tsets the value of the indicated pins to the indicated value",
        f"\t\t{GET_COMMAND}\tprints the state of the indicated pins",
        "\tstate: ",
        f"\t\t{HIGH_STATE_TOKEN}\tlogical 1 for the indicated pins, equivalent voltage 3.3[V]",
        f"\t\t{LOW_STATE_TOKEN}\tlogical 0 for the indicated pins, equivalent voltage 0[V]",
        "\tpins: ",
        f"\t\t{ALL_PINS_TOKEN}\tBCM pins between 0 and {LAST_PIN_NUMBER}",
        "Examples:",
        f"\tsudo {app} {HELP_COMMAND}",
        f"\tsudo {app} {GET_COMMAND} {ALL_PINS_TOKEN}",
        f"\tsudo {app} {GET_COMMAND} 4",
        f"\tsudo {app} {GET_COMMAND} 10 11",
        f"\tsudo {app} {SET_COMMAND} {LOW_STATE_TOKEN} {ALL_PINS_TOKEN}",
        f"\tsudo {app} {SET_COMMAND} {HIGH_STATE_TOKEN} 12",
        f"\tsudo {app} {SET_COMMAND} {LOW_STATE_TOKEN} 2 5 7",
    ]
    if config.show_access_help:
        lines += [
            "Access:",
            "\tThe application needs access to /dev/mem or /dev/gpiomem to control GPIO pins. "
            "This is why sudo is required.",
            "\tIn order to gain access to /dev/mem you need to run, only once after installation, "
            "the following commands:",
            f"\t\tsudo snap connect {SNAP_NAME}:physical-memory-control core:physical-memory-control",
            f"\t\tsudo snap connect {SNAP_NAME}:physical-memory-observe core:physical-memory-observe",
        ]
    return "\n".join(lines)
