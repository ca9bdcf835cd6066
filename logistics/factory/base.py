
class Factory:
    """
    Factory Base Class

    Factory method pattern

    In class-based programming, the factory method pattern is a creational pattern that
    uses factory methods to deal with the problem of creating objects without having to
    specify the exact class of the object that will be created. Configuration is taken
    in the constructor and every call to `create` builds a new object from it.
    """

    def create(self):
        """ interface """
        raise NotImplementedError
