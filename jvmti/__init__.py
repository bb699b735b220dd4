""" Parsing and formatting of java virtual machine type signatures.

Example usage:

>>> from jvmti import parse_signature, format_type
>>> format_type(parse_signature('[Ljava/lang/String;'))
'java.lang.String[]'

"""

# Define version here. Used in setup script:
__version_info__ = (0, 1, 0)
__version__ = ".".join(map(str, __version_info__))

from .common import JvmtiError, MalformedSignature  # noqa: E402
from .nodes import JavaType, BaseType, ClassType, ArrayType  # noqa: E402
from .signature import SignatureParser, parse_signature  # noqa: E402
from .signature import parse_signature_strict  # noqa: E402
from .printer import format_type, format_class_name, print_type  # noqa: E402
from .native import JavaClass  # noqa: E402
from .classes import Class, ClassId  # noqa: E402


__all__ = [
    "ArrayType",
    "BaseType",
    "Class",
    "ClassId",
    "ClassType",
    "JavaClass",
    "JavaType",
    "JvmtiError",
    "MalformedSignature",
    "SignatureParser",
    "format_class_name",
    "format_type",
    "parse_signature",
    "parse_signature_strict",
    "print_type",
]
