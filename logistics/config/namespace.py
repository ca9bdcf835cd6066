
import argparse


class NestedNamespace(argparse.Namespace):
    """
    Nested Namespace
    (Simple class used by default by parse_args() to create
     an object holding attributes and return it.)

    dotted destinations are grouped: 'log.level' -> config.log.level
    """

    def __setattr__(self, name, value):
        if "." in name:
            group, name = name.split(".", 1)
            namespace = getattr(self, group, NestedNamespace())
            setattr(namespace, name, value)
            self.__dict__[group] = namespace
        else:
            self.__dict__[name] = value
