
import sys

from logistics.config.namespace import NestedNamespace


DEFAULT_LOG_LEVEL = "WARNING"


def config(argv=None):
    """
    Build the run config from command-line arguments.

    the first argument is always the mode token (free text, never an option),
    everything after it is kept in `extras` and otherwise ignored.
    (eg. ["-x"] -> mode="-x", ["road", "-h"] -> mode="road", extras=["-h"])
    """
    if argv is None:
        argv = sys.argv[1:]  # 0 is excute file_name

    config = NestedNamespace()
    delivery(config, argv)
    log(config)
    return config


def delivery(config, argv):
    config.mode = argv[0] if argv else None
    config.extras = list(argv[1:])


def log(config):
    setattr(config, "log.level", DEFAULT_LOG_LEVEL)
