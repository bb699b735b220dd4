""" Native handles handed out by a running virtual machine.
"""


class JavaClass:
    """ Opaque reference to a class inside a virtual machine.

    The value is whatever the virtual machine handed out, usually a pointer
    sized integer. It is only stored and compared, never looked into.
    """

    __slots__ = ["_value"]

    def __init__(self, value):
        self._value = value

    def __eq__(self, other):
        if not isinstance(other, JavaClass):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        if isinstance(self._value, int):
            return "JavaClass(0x{:X})".format(self._value)
        return "JavaClass({!r})".format(self._value)
