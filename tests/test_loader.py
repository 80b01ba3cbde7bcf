"""Tests for schema and document loading."""

import json

import pytest
from graphql import GraphQLSyntaxError, OperationDefinitionNode, build_schema, introspection_from_schema

from gql_optypes.core.loader import collect_files, load_documents, load_schema


class TestCollectFiles:
    """Tests for collect_files."""

    def test_single_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query { a: Int }")
        assert collect_files(str(path), (".graphql",)) == [str(path)]

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "schema.txt"
        path.write_text("")
        assert collect_files(str(path), (".graphql",)) == []

    def test_directory_sorted_and_recursive(self, tmp_path):
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "b.gql").write_text("")
        (tmp_path / "a.graphql").write_text("")
        (tmp_path / "notes.md").write_text("")
        files = collect_files(str(tmp_path), (".graphql", ".gql"))
        assert files == sorted([str(tmp_path / "a.graphql"), str(tmp_path / "nested" / "b.gql")])


class TestLoadSchema:
    """Tests for load_schema."""

    def test_sdl_file(self, tmp_path, sdl):
        path = tmp_path / "schema.graphqls"
        path.write_text(sdl)
        schema = load_schema(str(path))
        assert schema.get_type("Person") is not None

    def test_directory_is_concatenated(self, tmp_path):
        (tmp_path / "a.graphql").write_text("type Query { user: User }")
        (tmp_path / "b.graphql").write_text("type User { id: ID! }")
        schema = load_schema(str(tmp_path))
        assert schema.query_type.fields["user"].type.name == "User"

    def test_introspection_json(self, tmp_path, sdl):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"data": introspection_from_schema(build_schema(sdl))}))
        schema = load_schema(str(path))
        assert "friends" in schema.get_type("Person").fields

    def test_introspection_without_envelope(self, tmp_path, sdl):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps(introspection_from_schema(build_schema(sdl))))
        assert load_schema(str(path)).get_type("Animal") is not None

    @pytest.mark.parametrize(
        "content, message",
        [
            ("{ not json", "Invalid JSON"),
            ("[1, 2]", "must be a JSON object"),
            ('{"data": {}}', "Invalid introspection result"),
        ],
    )
    def test_bad_introspection(self, tmp_path, content, message):
        path = tmp_path / "schema.json"
        path.write_text(content)
        with pytest.raises(ValueError, match=message):
            load_schema(str(path))

    def test_missing_files(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_schema(str(tmp_path))


class TestLoadDocuments:
    """Tests for load_documents."""

    def test_merges_in_order(self, tmp_path):
        first = tmp_path / "a.graphql"
        second = tmp_path / "b.graphql"
        first.write_text("query A { people { id } }")
        second.write_text("query B { people { id } }\nfragment F on Person { id }")
        document = load_documents([str(first), str(second)])
        names = [d.name.value for d in document.definitions]
        assert names == ["A", "B", "F"]
        assert isinstance(document.definitions[0], OperationDefinitionNode)

    def test_directory(self, tmp_path):
        (tmp_path / "a.gql").write_text("query A { people { id } }")
        (tmp_path / "b.graphql").write_text("query B { people { id } }")
        assert len(load_documents([str(tmp_path)]).definitions) == 2

    def test_parse_error_propagates(self, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("query { people { ")
        with pytest.raises(GraphQLSyntaxError):
            load_documents([str(path)])

    def test_missing_documents(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_documents([str(tmp_path)])
