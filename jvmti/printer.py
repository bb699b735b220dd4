""" Functions to convert java types into their conventional java syntax.
"""

from .nodes import JavaType, BaseType, ClassType, ArrayType


def format_type(java_type):
    """ Convert the given java type into a human readable representation.

    For example int[][] or java.lang.String.
    """
    if not isinstance(java_type, JavaType):
        raise TypeError("Expected a java type, got {!r}".format(java_type))

    if isinstance(java_type, ArrayType):
        dimensions = java_type.dimensions
        java_type = java_type.element_type
    else:
        dimensions = 0

    if isinstance(java_type, BaseType):
        name = java_type.kind.value
    elif isinstance(java_type, ClassType):
        name = format_class_name(java_type.signature)
    else:  # pragma: no cover
        raise NotImplementedError(str(java_type))
    return name + "[]" * dimensions


def format_class_name(signature):
    """ Turn a class signature like 'Ljava/lang/String;' into a dotted name.

    A missing 'L' or ';' is no problem.
    """
    if signature.startswith("L"):
        signature = signature[1:]
    if signature.endswith(";"):
        signature = signature[:-1]
    return signature.replace("/", ".")


def print_type(java_type, file=None):
    """ Dump the structure of a java type, one line per level. """
    TypePrinter(file=file).print_type(java_type)


class TypePrinter:
    def __init__(self, file=None):
        self.file = file

    def print_type(self, java_type):
        indent = "  "
        while isinstance(java_type, ArrayType):
            self.print(indent, "array of")
            indent += "  "
            java_type = java_type.component_type

        if isinstance(java_type, BaseType):
            self.print(indent, java_type.kind.value)
        elif isinstance(java_type, ClassType):
            self.print(
                indent,
                "class {} ({})".format(
                    format_class_name(java_type.signature),
                    java_type.signature,
                ),
            )
        else:
            raise TypeError("Expected a java type, got {!r}".format(java_type))

    def print(self, indent, text):
        print("{}{}".format(indent, text), file=self.file)
