
from logistics.decorator import register
from logistics.mode import TransportMode

from .base import Transport


@register("transport:air")
class Airplane(Transport):

    mode = TransportMode.AIR
    message = "Airplane delivering by air."
