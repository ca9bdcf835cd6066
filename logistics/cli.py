
import logging

from logistics.config import args
from logistics.config.registry import Registry
from logistics.mode import TransportMode
from logistics.planner import plan_delivery
from logistics import utils as common_utils

logger = logging.getLogger(__name__)


UNKNOWN_MODE_MESSAGE = "Unknown mode. Use: road | sea | air. Showing all:"


def resolve_modes(mode_text):
    """
    Resolve the command-line mode token.

    * Args:
        mode_text: raw token or None (no argument)

    * Returns:
        (modes, unrecognized)
        - None -> every mode, False
        - 'road' | 'sea' | 'air' (trimmed, any case) -> [mode], False
        - otherwise -> every mode, True
    """
    if mode_text is None:
        return list(TransportMode), False

    mode = TransportMode.parse(mode_text)
    if mode is None:
        return list(TransportMode), True
    return [mode], False


def demo(logistics, out=print):
    plan_delivery(logistics, out=out)


def run(modes, out=print, planner="simple"):
    logistics_class = Registry().get(f"logistics:{planner}")
    for mode in modes:
        demo(logistics_class(mode), out=out)


def main(argv=None, out=print):
    config = args.config(argv)
    common_utils.set_logging_config(config)

    if config.extras:
        logger.debug(f"ignore extra arguments: {config.extras}")

    modes, unrecognized = resolve_modes(config.mode)
    if unrecognized:
        logger.debug(f"unrecognized mode: {config.mode!r}")
        out(UNKNOWN_MODE_MESSAGE)

    run(modes, out=out)
    return 0
