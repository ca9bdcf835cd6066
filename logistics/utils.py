
import logging
import sys


""" Logging """


def set_logging_config(config):
    # stdout is reserved for the delivery lines
    stderr_handler = logging.StreamHandler(sys.stderr)

    logging_handlers = [stderr_handler]
    logging_level = getattr(logging, config.log.level, logging.WARNING)

    logging.basicConfig(
        format="%(asctime)s (%(filename)s:%(lineno)d): [%(levelname)s] - %(message)s",
        handlers=logging_handlers,
        level=logging_level,
    )
