
from logistics.transport.base import Transport
from logistics.transport.truck import Truck
from logistics.transport.ship import Ship
from logistics.transport.airplane import Airplane


__all__ = ["Transport", "Truck", "Ship", "Airplane"]
