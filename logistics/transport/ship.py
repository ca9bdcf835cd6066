
from logistics.decorator import register
from logistics.mode import TransportMode

from .base import Transport


@register("transport:sea")
class Ship(Transport):
    """ Ship: sea transport """

    mode = TransportMode.SEA
    message = "Ship delivering by sea."
