""" Data structures for java types.

A java type is one of three kinds of nodes:

- BaseType: one of the primitive types, like int or boolean.
- ClassType: a reference type, which still holds the signature text it was
  parsed from (for example 'Ljava/lang/String;').
- ArrayType: one array dimension wrapped around a component type.

Nodes are created by the signature parser and are not changed afterwards.
"""

from .enums import BaseTypeKind


class JavaType:
    """ Base class of all java types. """

    __slots__ = []

    def _key(self):
        raise NotImplementedError()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    @property
    def is_array(self):
        return isinstance(self, ArrayType)

    @property
    def is_class(self):
        return isinstance(self, ClassType)

    @property
    def is_primitive(self):
        return isinstance(self, BaseType)


class BaseType(JavaType):
    """ A primitive java type, such as int. """

    __slots__ = ["kind"]

    def __init__(self, kind):
        assert isinstance(kind, BaseTypeKind)
        self.kind = kind

    def _key(self):
        return self.kind

    def __repr__(self):
        return "BaseType({})".format(self.kind.value)


class ClassType(JavaType):
    """ A reference type.

    The signature is kept as found in the parsed text, including the
    leading 'L' and anything after the class name.
    """

    __slots__ = ["signature"]

    def __init__(self, signature):
        self.signature = signature

    def _key(self):
        return self.signature

    def __repr__(self):
        return "ClassType({!r})".format(self.signature)


class ArrayType(JavaType):
    """ One dimension of an array around a component type. """

    __slots__ = ["component_type"]

    def __init__(self, component_type):
        assert isinstance(component_type, JavaType)
        self.component_type = component_type

    def _key(self):
        return (self.dimensions, self.element_type)

    def __repr__(self):
        dimensions = self.dimensions
        return "{}{!r}{}".format(
            "ArrayType(" * dimensions, self.element_type, ")" * dimensions
        )

    @property
    def dimensions(self):
        """ The number of nested array levels, starting at this one. """
        dimensions = 0
        typ = self
        while isinstance(typ, ArrayType):
            dimensions += 1
            typ = typ.component_type
        return dimensions

    @property
    def element_type(self):
        """ The innermost type which is not an array. """
        typ = self
        while isinstance(typ, ArrayType):
            typ = typ.component_type
        return typ


BOOLEAN = BaseType(BaseTypeKind.Boolean)
BYTE = BaseType(BaseTypeKind.Byte)
CHAR = BaseType(BaseTypeKind.Char)
DOUBLE = BaseType(BaseTypeKind.Double)
FLOAT = BaseType(BaseTypeKind.Float)
INT = BaseType(BaseTypeKind.Int)
LONG = BaseType(BaseTypeKind.Long)
SHORT = BaseType(BaseTypeKind.Short)
VOID = BaseType(BaseTypeKind.Void)
