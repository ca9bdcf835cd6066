
from logistics.decorator import register
from logistics.mode import TransportMode

from .base import Transport


@register("transport:road")
class Truck(Transport):
    """
    Truck

    road transport. serves TransportMode.ROAD
    """

    mode = TransportMode.ROAD
    message = "Truck delivering by road."
