""" Java type related enums. """


import enum


class BaseTypeKind(enum.Enum):
    """ The primitive java types. The value is the java keyword. """

    Boolean = "boolean"
    Byte = "byte"
    Char = "char"
    Double = "double"
    Float = "float"
    Int = "int"
    Long = "long"
    Short = "short"
    Void = "void"
