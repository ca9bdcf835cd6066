
import logging

from overrides import overrides

from logistics.config.registry import Registry
from logistics.mode import TransportMode
import logistics.transport  # noqa: F401 (register transport variants)

from .base import Factory

logger = logging.getLogger(__name__)


class TransportFactory(Factory):
    """
    Transport Factory Class

    resolve TransportMode -> registered Transport variant ("transport:<mode.value>")

    * Args:
        mode: TransportMode (anything else is rejected)
    """

    def __init__(self, mode):
        if not isinstance(mode, TransportMode):
            raise ValueError(f"Unknown mode: {mode}")

        self.mode = mode
        self.registry = Registry()

    @overrides
    def create(self):
        transport_class = self.registry.get(f"transport:{self.mode.value}")
        logger.debug(f"{self.mode.name} -> {transport_class.__name__}")
        return transport_class()
