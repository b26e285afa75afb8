"""Tests for the document encoder."""

import pytest
from graphql import parse

from gql_compose.core.builder import field, fragment, fragment_ref, inline_fragment, mutation, query
from gql_compose.core.encoder import Encoder, encode
from gql_compose.core.ir import Document, EnumValue, Operation, Symbol, Variable


@pytest.fixture
def encoder():
    return Encoder()


@pytest.fixture
def dog_query():
    """A query with aliases, arguments, fragments and an inline fragment."""
    return Document(
        operation=Operation.QUERY,
        name="TestQuery",
        fields=[
            field(("dog", "theDog"), {"nick": "Luna"}, [
                fragment_ref("dogFields"),
                field(("name", "dogName")),
            ]),
            field("field", {}, [
                inline_fragment("SomeType", [
                    field("field1"),
                    field("field2"),
                ]),
                fragment_ref("otherFields"),
                field("subfield"),
            ]),
        ],
        fragments=[
            fragment("dogFields", "DogObject", [field(Symbol("race"))]),
            fragment("otherFields", "OtherObject", [field("someField")]),
        ],
    )


class TestEncode:
    """Tests for encoding whole documents."""

    def test_simple_query(self):
        document = Document(
            operation=Operation.QUERY,
            name="TestQuery",
            fields=[field("field", {}, [field("subfield")])],
        )

        expected = (
            "query TestQuery {\n"
            "  field {\n"
            "    subfield\n"
            "  }\n"
            "}"
        )
        assert encode(document) == expected

    def test_mutation_with_variables(self):
        document = Document(
            operation=Operation.MUTATION,
            name="TestMutation",
            fields=[field("field", {"input": Symbol("$input")}, [field("subfield")])],
            variables=[Variable(name="input", type="Integer", default_value=10)],
        )

        expected = (
            "mutation TestMutation($input: Integer = 10) {\n"
            "  field(input: $input) {\n"
            "    subfield\n"
            "  }\n"
            "}"
        )
        assert encode(document) == expected

    def test_several_variables(self):
        document = query(
            "Search",
            {"term": ("String", "*"), Symbol("first"): "Int!", "after": "ID"},
            [field("search", {"term": Symbol("$term"), "first": Symbol("$first")})],
        )

        expected = (
            'query Search($term: String = "*", $first: Int!, $after: ID) {\n'
            "  search(term: $term, first: $first)\n"
            "}"
        )
        assert encode(document) == expected

    def test_fragments(self):
        document = query(
            "TestQuery",
            {},
            [field("field", {}, [field("subfield"), fragment_ref("someFields")])],
            [fragment("someFields", "SomeType", [field("field1"), field("field2")])],
        )

        expected = (
            "query TestQuery {\n"
            "  field {\n"
            "    subfield\n"
            "    ...someFields\n"
            "  }\n"
            "}\n"
            "fragment someFields on SomeType {\n"
            "  field1\n"
            "  field2\n"
            "}"
        )
        assert encode(document) == expected

    def test_inline_fragment(self):
        document = query("TestQuery", {}, [
            field("field", {}, [
                field("subfield"),
                inline_fragment("SomeType", [field("field1"), field("field2")]),
            ]),
        ])

        expected = (
            "query TestQuery {\n"
            "  field {\n"
            "    subfield\n"
            "    ... on SomeType {\n"
            "      field1\n"
            "      field2\n"
            "    }\n"
            "  }\n"
            "}"
        )
        assert encode(document) == expected

    def test_multiple_fields_and_fragments(self, dog_query):
        expected = (
            "query TestQuery {\n"
            '  theDog: dog(nick: "Luna") {\n'
            "    ...dogFields\n"
            "    dogName: name\n"
            "  }\n"
            "  field {\n"
            "    ... on SomeType {\n"
            "      field1\n"
            "      field2\n"
            "    }\n"
            "    ...otherFields\n"
            "    subfield\n"
            "  }\n"
            "}\n"
            "fragment dogFields on DogObject {\n"
            "  race\n"
            "}\n"
            "fragment otherFields on OtherObject {\n"
            "  someField\n"
            "}"
        )
        assert encode(dog_query) == expected

    def test_deterministic(self, dog_query, encoder):
        assert encoder.encode(dog_query) == encoder.encode(dog_query)

    def test_output_is_valid_graphql(self, dog_query):
        parsed = parse(encode(dog_query))
        assert len(parsed.definitions) == 3

    def test_mutation_and_added_field_are_valid_graphql(self, dog_query):
        extra = mutation("Save", {"id": "ID!"}, [field("save", {"id": Symbol("$id")}, [field("ok")])])
        parse(encode(extra))
        parse(encode(dog_query.add_field(field("extra"))))


class TestDirectives:
    """Tests for field directives."""

    def test_bare_directive(self):
        document = query("Q", {}, [field("name", None, None, ["cached"])])
        assert encode(document) == "query Q {\n  name @cached\n}"

    def test_directives_after_arguments(self):
        document = query("Q", {"withFriends": "Boolean!"}, [
            field(
                "friends",
                {"first": 10},
                [field("id")],
                [("include", {"if": Symbol("$withFriends")}), "cached"],
            ),
        ])

        expected = (
            "query Q($withFriends: Boolean!) {\n"
            "  friends(first: 10) @include(if: $withFriends) @cached {\n"
            "    id\n"
            "  }\n"
            "}"
        )
        assert encode(document) == expected
        parse(encode(document))

    def test_directive_with_empty_arguments(self):
        document = query("Q", {}, [field("name", None, None, [("cached", {})])])
        assert encode(document) == "query Q {\n  name @cached\n}"


class TestEncodeValue:
    """Tests for argument value rendering."""

    def test_string_is_quoted(self, encoder):
        assert encoder.encode_value("Luna") == '"Luna"'

    def test_symbol_is_bare(self, encoder):
        assert encoder.encode_value(Symbol("$id")) == "$id"

    def test_enum_is_bare(self, encoder):
        assert encoder.encode_value(EnumValue("ACTIVE")) == "ACTIVE"

    def test_numbers(self, encoder):
        assert encoder.encode_value(10) == "10"
        assert encoder.encode_value(1.5) == "1.5"

    def test_booleans(self, encoder):
        assert encoder.encode_value(True) == "true"
        assert encoder.encode_value(False) == "false"

    def test_none(self, encoder):
        assert encoder.encode_value(None) == "null"

    def test_sequence_elements_are_concatenated(self, encoder):
        assert encoder.encode_value([1, 2, 3]) == "123"
        assert encoder.encode_value(("a", "b")) == '"a""b"'

    def test_mapping(self, encoder):
        value = {"status": EnumValue("ACTIVE"), "name": "x", "limit": 5}
        assert encoder.encode_value(value) == '{status: ACTIVE, name: "x", limit: 5}'

    def test_nested_mapping(self, encoder):
        assert encoder.encode_value({"where": {"id": Symbol("$id")}}) == "{where: {id: $id}}"

    def test_nested_field_arguments(self):
        document = query("Q", {}, [
            field("users", {"where": {"status": EnumValue("ACTIVE")}, "ids": [1, 2]}),
        ])
        assert encode(document) == "query Q {\n  users(where: {status: ACTIVE}, ids: 12)\n}"

    def test_arguments(self, encoder):
        assert encoder.encode_arguments({"id": 1, Symbol("slug"): "a"}) == '(id: 1, slug: "a")'

    def test_empty_arguments(self, encoder):
        assert encoder.encode_arguments({}) == ""
        assert encoder.encode_arguments(None) == ""
