
class Transport:
    """
    Transport Base Class

    a delivery mechanism produced by TransportFactory for one TransportMode.
    stateless, so every planning step gets a fresh instance.

    * Attributes:
        mode: TransportMode this transport serves
        message: delivery line (eg. 'Truck delivering by road.')
    """

    mode = None
    message = None

    def deliver(self, out=print):
        """
        Emit exactly one delivery line to the output sink.

        * Kwargs:
            out: callable that takes one line of text (default: print)
        """
        if self.message is None:
            raise NotImplementedError
        out(self.message)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
