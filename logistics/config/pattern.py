
class Singleton(type):
    """
    Design Pattern Base

    Singleton Meta Class
    restricts the instantiation of a class to one object.
    (the Registry is shared by every register decorator and factory)
    """

    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]
