""" Classes loaded into a virtual machine. """

import logging
from .native import JavaClass
from .printer import format_type
from .signature import parse_signature_strict


logger = logging.getLogger("jvmti.classes")


class ClassId:
    """ Local reference to a java class. """

    __slots__ = ["native_id"]

    def __init__(self, native_id):
        assert isinstance(native_id, JavaClass)
        self.native_id = native_id

    def __eq__(self, other):
        if not isinstance(other, ClassId):
            return NotImplemented
        return self.native_id == other.native_id

    def __hash__(self):
        return hash(self.native_id)

    def __repr__(self):
        return "ClassId({!r})".format(self.native_id)


class Class:
    """ A java class: its id together with its parsed type signature. """

    def __init__(self, id, signature):
        self.id = id
        self.signature = signature

    def __repr__(self):
        return "Class({!r}, {!r})".format(self.id, self.signature)

    @property
    def name(self):
        """ The name of this class in java syntax. """
        return format_type(self.signature)

    @classmethod
    def from_signature(cls, native_id, signature, long_code="L"):
        """ Create a class from a native handle and a signature string.

        Raises MalformedSignature when the signature cannot be parsed.
        """
        java_type = parse_signature_strict(signature, long_code=long_code)
        logger.debug("Loaded class %s as %s", native_id, java_type)
        return cls(ClassId(native_id), java_type)
