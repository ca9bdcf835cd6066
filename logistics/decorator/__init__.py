
from logistics.decorator.register import register


__all__ = ["register"]
