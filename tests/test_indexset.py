from xmlpull.attribute import Attribute
from xmlpull.indexset import AttributesSet
from xmlpull.name import Name


def test_indexset():
    s = AttributesSet()
    not_here = Name(local_name="attr1000", namespace="test")

    for i in range(50000):
        name = Name(local_name=f"attr{i}")
        assert name not in s
        s.push(Attribute(name, ""))
        assert not_here not in s

    assert Name(local_name="attr1234") in s
    assert Name(local_name="attr0") in s
    assert Name(local_name="attr49999") in s
    assert len(s) == 50000


def test_order_is_preserved():
    s = AttributesSet()
    attrs = [Attribute(Name.local(n), v) for n, v in [("b", "1"), ("a", "2"), ("c", "3")]]
    for attr in attrs:
        s.push(attr)
    assert s.to_list() == attrs
    assert list(s) == attrs


def test_to_list_is_a_copy():
    s = AttributesSet()
    s.push(Attribute(Name.local("x"), "v"))
    copy = s.to_list()
    copy.clear()
    assert len(s) == 1
    assert Name.local("x") in s


def test_prefix_distinguishes_names():
    s = AttributesSet()
    s.push(Attribute(Name.prefixed("x", "p"), "v"))
    assert Name.prefixed("x", "p") in s
    assert Name.local("x") not in s