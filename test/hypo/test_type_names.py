""" Property tests using hypothesis to generate type signatures.

Idea:
- generate a random primitive or class type, wrapped in arrays
- parse the signature and format the type again
- compare with the java name which was built alongside the signature
"""

from hypothesis import given, strategies as st

from jvmti import parse_signature, format_type, SignatureParser
from jvmti.nodes import ArrayType

base_types = st.sampled_from(
    [
        ("B", "byte"),
        ("C", "char"),
        ("D", "double"),
        ("F", "float"),
        ("I", "int"),
        ("L", "long"),
        ("S", "short"),
        ("V", "void"),
        ("Z", "boolean"),
    ]
)

identifiers = st.from_regex(r"[A-Za-z_$][A-Za-z0-9_$]{0,8}", fullmatch=True)
class_types = st.lists(identifiers, min_size=1, max_size=5).map(
    lambda parts: ("L" + "/".join(parts) + ";", ".".join(parts))
)

dimensions = st.integers(min_value=0, max_value=10)


@given(base_types, dimensions)
def test_base_type_names(base_type, depth):
    code, name = base_type
    typ = parse_signature("[" * depth + code)
    assert format_type(typ) == name + "[]" * depth
    if depth:
        assert isinstance(typ, ArrayType)
        assert typ.dimensions == depth


@given(class_types, dimensions)
def test_class_type_names(class_type, depth):
    signature, name = class_type
    typ = parse_signature("[" * depth + signature)
    assert format_type(typ) == name + "[]" * depth
    element_type = typ.element_type if depth else typ
    assert element_type.signature == signature


@given(base_types, dimensions)
def test_standard_long_code(base_type, depth):
    code, name = base_type
    if code == "L":
        code = "J"
    typ = SignatureParser(long_code="J").parse("[" * depth + code)
    assert format_type(typ) == name + "[]" * depth


@given(st.text(max_size=20))
def test_parse_never_raises(signature):
    typ = parse_signature(signature)
    if typ is not None:
        assert isinstance(format_type(typ), str)


@given(st.text(alphabet="[BCDFIJLSVZX;/", max_size=12))
def test_formatting_is_deterministic(signature):
    a = parse_signature(signature)
    b = parse_signature(signature)
    assert a == b
    if a is not None:
        assert format_type(a) == format_type(b)
