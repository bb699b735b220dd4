""" Type signature parser.

A type signature is the compact notation which the java virtual machine
uses to describe the type of a field or a variable. Examples:

- 'I' is an int
- '[I' is an int[]
- 'Ljava/lang/String;' is a java.lang.String

The parser returns None when the signature is malformed.
"""

from .common import MalformedSignature
from .enums import BaseTypeKind
from .nodes import BaseType, ClassType, ArrayType


# Single character codes of the primitive types, except for long, which
# depends on the long code of the parser.
BASE_TYPE_CODES = {
    "B": BaseTypeKind.Byte,
    "C": BaseTypeKind.Char,
    "D": BaseTypeKind.Double,
    "F": BaseTypeKind.Float,
    "I": BaseTypeKind.Int,
    "S": BaseTypeKind.Short,
    "V": BaseTypeKind.Void,
    "Z": BaseTypeKind.Boolean,
}

# A lone 'L' is a long by default, the class file format uses 'J' instead.
LONG_CODES = ("L", "J")


class SignatureParser:
    """ Parser for type signatures.

    The long_code selects the single character that denotes a long.
    With 'L' a lone 'L' is a long. With 'J' a lone 'J' is a long,
    and a lone 'L' is malformed.
    """

    def __init__(self, long_code="L"):
        if long_code not in LONG_CODES:
            raise ValueError(
                "Invalid long code {!r}, expected one of {}".format(
                    long_code, ", ".join(LONG_CODES)
                )
            )
        self.long_code = long_code
        self.base_types = {
            code: BaseType(kind) for code, kind in BASE_TYPE_CODES.items()
        }
        self.base_types[long_code] = BaseType(BaseTypeKind.Long)

    def parse(self, signature):
        """ Convert the given signature into a java type.

        None is returned if the signature is malformed.
        """
        if not isinstance(signature, str):
            raise TypeError(
                "Expected a str signature, got {}".format(
                    type(signature).__name__
                )
            )

        # Each leading '[' adds one array dimension:
        dimensions = 0
        while (
            len(signature) - dimensions > 1 and signature[dimensions] == "["
        ):
            dimensions += 1

        typ = self.parse_element(signature[dimensions:])
        if typ is None:
            return None

        for _ in range(dimensions):
            typ = ArrayType(typ)
        return typ

    def parse_element(self, signature):
        """ Parse a signature which does not start an array. """
        if len(signature) == 0:
            return None
        elif len(signature) == 1:
            return self.base_types.get(signature)
        elif signature[0] == "L":
            return ClassType(signature)
        else:
            return None


def parse_signature(signature, long_code="L"):
    """ Parse a type signature, returns None when it is malformed. """
    return SignatureParser(long_code=long_code).parse(signature)


def parse_signature_strict(signature, long_code="L"):
    """ Parse a type signature.

    Raises MalformedSignature when the signature is malformed.
    """
    typ = parse_signature(signature, long_code=long_code)
    if typ is None:
        raise MalformedSignature(signature)
    return typ
