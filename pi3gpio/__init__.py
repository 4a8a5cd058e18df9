import logging.config
import sys

from pi3gpio.commands import handle_command
from pi3gpio.config import Pi3GPIOConfig
from pi3gpio.errors import Pi3GPIOError

logger = logging.getLogger("pi3gpio")

_VERBOSE_FLAGS = ("-v", "--verbose")


def run() -> None:
    args = sys.argv[1:]
    cfg = Pi3GPIOConfig()
    logging.config.dictConfig(cfg.logging)
    if any(flag in args for flag in _VERBOSE_FLAGS):
        logging.getLogger().setLevel(logging.DEBUG)
        args = [arg for arg in args if arg not in _VERBOSE_FLAGS]

    try:
        handle_command(args, cfg)
    except Pi3GPIOError as e:
        logger.debug("command failed", exc_info=True)
        print(e, file=sys.stderr)
        print(cfg.help_suggestion, file=sys.stderr)
        sys.exit(1)
