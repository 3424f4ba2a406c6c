from pgcompose.compiler.postgres.identifiers import (
    LocalIdentifierMap,
    escape_identifier,
    resolve_identifier,
)
from pgcompose.items.models import LocalIdentifier


def test_escape_identifier_quotes_name() -> None:
    assert escape_identifier("user") == '"user"'


def test_escape_identifier_doubles_quotes() -> None:
    assert escape_identifier('a"b') == '"a""b"'
    assert escape_identifier('""') == '""""""'


def test_escape_identifier_keeps_other_characters() -> None:
    assert escape_identifier("we'ird. name;") == '"we\'ird. name;"'


def test_local_identifier_map_assigns_in_first_use_order() -> None:
    local_identifiers = LocalIdentifierMap()
    first = LocalIdentifier("first")
    second = LocalIdentifier("second")
    assert local_identifiers.resolve(first) == "__local_0__"
    assert local_identifiers.resolve(second) == "__local_1__"
    assert local_identifiers.resolve(first) == "__local_0__"
    assert len(local_identifiers) == 2


def test_resolve_identifier_mixes_names_and_keys() -> None:
    key = LocalIdentifier()
    assert resolve_identifier([key, "id"], LocalIdentifierMap()) == '__local_0__."id"'


def test_resolve_identifier_without_names_is_empty() -> None:
    assert resolve_identifier([], LocalIdentifierMap()) == ""


def test_local_identifier_repr() -> None:
    assert repr(LocalIdentifier()) == "LocalIdentifier()"
    assert repr(LocalIdentifier("row")) == "LocalIdentifier('row')"


def test_local_identifier_map_compares_value_keys_by_value() -> None:
    local_identifiers = LocalIdentifierMap()
    assert local_identifiers.resolve(int("1000")) == "__local_0__"
    assert local_identifiers.resolve(int("1000")) == "__local_0__"
    assert local_identifiers.resolve(1.5) == "__local_1__"
    assert local_identifiers.resolve(None) == "__local_2__"
    assert local_identifiers.resolve(None) == "__local_2__"
    assert len(local_identifiers) == 3


def test_local_identifier_map_keeps_bool_and_int_apart() -> None:
    local_identifiers = LocalIdentifierMap()
    assert local_identifiers.resolve(1) == "__local_0__"
    assert local_identifiers.resolve(True) == "__local_1__"


def test_local_identifier_map_compares_objects_by_identity() -> None:
    local_identifiers = LocalIdentifierMap()
    assert local_identifiers.resolve((1, 2)) == "__local_0__"
    assert local_identifiers.resolve(tuple([1, 2])) == "__local_1__"
