from logistics.factory.base import Factory
from logistics.factory.transport import TransportFactory


__all__ = [
    "Factory",
    "TransportFactory",
]
