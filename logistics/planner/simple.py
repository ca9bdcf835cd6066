
from overrides import overrides

from logistics.decorator import register
from logistics.factory import TransportFactory

from .base import Logistics


@register("logistics:simple")
class SimpleLogistics(Logistics):
    """
    Simple Logistics

    one TransportMode, one Transport variant per planning step.

    * Args:
        mode: TransportMode
    """

    def __init__(self, mode):
        self.transport_factory = TransportFactory(mode)

    @property
    def mode(self):
        return self.transport_factory.mode

    @overrides
    def create_transport(self):
        return self.transport_factory.create()

    def __str__(self):
        return f"{self.__class__.__name__}({self.mode.name})"

    def __repr__(self):
        return str(self)
