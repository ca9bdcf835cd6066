
from enum import Enum


class TransportMode(Enum):
    """
    Transport Mode

    closed set of delivery modes.
    declaration order is the demo order (ROAD -> SEA -> AIR)
    """

    ROAD = "road"
    SEA = "sea"
    AIR = "air"

    @classmethod
    def parse(cls, text):
        """
        Convert a command-line token to TransportMode.
        (eg. " Road " -> TransportMode.ROAD, "plane" -> None)
        """
        if text is None:
            return None

        token = text.strip().lower()
        for mode in cls:
            if mode.value == token:
                return mode
        return None
