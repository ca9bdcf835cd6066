
from logistics.planner.base import Logistics, plan_delivery
from logistics.planner.simple import SimpleLogistics


__all__ = ["Logistics", "SimpleLogistics", "plan_delivery"]
