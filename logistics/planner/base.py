
import logging

logger = logging.getLogger(__name__)


def plan_delivery(planner, out=print):
    """
    Plan and run one delivery with the transport the planner creates.

    1. emit '[<planner>] Planning delivery...'
    2. planner.create_transport()
    3. transport.deliver(out)

    * Args:
        planner: any object with `create_transport()` (eg. SimpleLogistics)

    * Kwargs:
        out: callable that takes one line of text (default: print)
    """
    out(f"[{planner}] Planning delivery...")

    transport = planner.create_transport()
    logger.debug(f"{planner} created {transport!r}")
    transport.deliver(out)


class Logistics:
    """
    Logistics Base Class (Planner)

    the transport itself is created by subclasses (`create_transport`),
    the planning step is shared (`plan_delivery`).
    """

    def create_transport(self):
        """ interface """
        raise NotImplementedError

    def plan_delivery(self, out=print):
        plan_delivery(self, out=out)
