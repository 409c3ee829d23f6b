import pytest

from xmlpull.name import Name


def test_owned_name_from_str():
    assert Name.parse("prefix:name") == Name(local_name="name", namespace=None, prefix="prefix")
    assert Name.parse("name") == Name(local_name="name", namespace=None, prefix=None)


@pytest.mark.parametrize("text", ["", ":", ":a", "a:", "a:b:c"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        Name.parse(text)


def test_from_str_conversion():
    n1 = Name.from_str("p:some-name")
    n2 = Name.prefixed("some-name", "p")
    assert n1 == n2
    assert n1.local_name == "some-name"
    assert n1.prefix == "p"
    assert n1.namespace is None


def test_from_str_without_prefix():
    assert Name.from_str("plain") == Name.local("plain")


def test_display_includes_namespace():
    name = Name.qualified("attribute", "urn:namespace", "n")
    assert str(name) == "{urn:namespace}n:attribute"
    assert name.to_repr() == "n:attribute"


def test_repr_without_prefix():
    name = Name.qualified("item", "urn:namespace", None)
    assert name.to_repr() == "item"
    assert str(name) == "{urn:namespace}item"


def test_prefix_repr():
    assert Name.local("a").prefix_repr() == ""
    assert Name.prefixed("a", "p").prefix_repr() == "p"


def test_parse_round_trip():
    for text in ["x", "p:x", "xsi:string"]:
        assert Name.parse(text).to_repr() == text


def test_names_are_hashable():
    assert len({Name.local("a"), Name.local("a"), Name.prefixed("a", "p")}) == 2