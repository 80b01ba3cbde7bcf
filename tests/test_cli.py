"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from gql_optypes.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path, sdl):
    path = tmp_path / "schema.graphql"
    path.write_text(sdl)
    return str(path)


@pytest.fixture
def documents_dir(tmp_path):
    directory = tmp_path / "queries"
    directory.mkdir()
    (directory / "person.graphql").write_text(
        'query GetPerson { person(id: "1") { ...PersonParts } }\n'
        "fragment PersonParts on Person { name }\n"
    )
    return str(directory)


class TestGenerateCommand:
    """Tests for `gql-optypes generate`."""

    def test_generates_typescript(self, runner, schema_file, documents_dir, tmp_path):
        output = tmp_path / "types.ts"
        result = runner.invoke(main, ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Done! Generated 4 declarations" in result.output
        code = output.read_text()
        assert "export type PersonPartsFragment = { __typename?: 'Person' } & Pick<Person, 'name'>;" in code
        assert "export type GetPersonQueryPerson = { __typename?: 'Person' } & PersonPartsFragment;" in code

    def test_dialect_and_typename_flags(self, runner, schema_file, documents_dir, tmp_path):
        output = tmp_path / "types.js"
        result = runner.invoke(
            main,
            ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output),
             "--dialect", "flow", "--skip-typename"],
        )

        assert result.exit_code == 0, result.output
        code = output.read_text()
        assert "$ObjMapi" in code
        assert "__typename" not in code

    def test_config_file(self, runner, schema_file, documents_dir, tmp_path):
        config = tmp_path / "codegen.yml"
        config.write_text("typesPrefix: I\nfragmentSuffix: Fields\n")
        output = tmp_path / "types.ts"
        result = runner.invoke(
            main,
            ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output), "-c", str(config)],
        )

        assert result.exit_code == 0, result.output
        assert "export type IPersonPartsFields = " in output.read_text()

    def test_header(self, runner, schema_file, documents_dir, tmp_path):
        output = tmp_path / "types.ts"
        result = runner.invoke(
            main,
            ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output), "--header", "// @generated"],
        )

        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("// @generated\n\n")

    def test_verbose(self, runner, schema_file, documents_dir, tmp_path):
        output = tmp_path / "types.ts"
        result = runner.invoke(
            main, ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output), "-v"]
        )

        assert result.exit_code == 0, result.output
        assert "Dialect: typescript" in result.output
        assert "Definitions: 2" in result.output

    def test_synthesis_error(self, runner, schema_file, tmp_path):
        query = tmp_path / "bad.graphql"
        query.write_text('{ person(id: "1") { nope } }')
        output = tmp_path / "types.ts"
        result = runner.invoke(main, ["generate", "-s", schema_file, "-d", str(query), "-o", str(output)])

        assert result.exit_code == 1
        assert "Type 'Person' has no field 'nope'" in result.output
        assert not output.exists()

    def test_malformed_introspection(self, runner, documents_dir, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text("{ not json")
        output = tmp_path / "types.ts"
        result = runner.invoke(main, ["generate", "-s", str(schema), "-d", documents_dir, "-o", str(output)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_invalid_config_value(self, runner, schema_file, documents_dir, tmp_path):
        config = tmp_path / "config.yml"
        config.write_text("dialect: cobol\n")
        output = tmp_path / "types.ts"
        args = ["generate", "-s", schema_file, "-d", documents_dir, "-o", str(output), "-c", str(config)]
        result = runner.invoke(main, args)

        assert result.exit_code == 1
        assert "dialect" in result.output


class TestListCommand:
    """Tests for `gql-optypes list`."""

    def test_lists_names_and_kinds(self, runner, schema_file, documents_dir):
        result = runner.invoke(main, ["list", "-s", schema_file, "-d", documents_dir])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "PersonPartsFragment\tfragment",
            "GetPersonQueryPerson\tselection",
            "GetPersonQuery\toperation",
            "GetPersonQueryVariables\tvariables",
        ]

    def test_unresolved_fragment(self, runner, schema_file, tmp_path):
        query = tmp_path / "bad.graphql"
        query.write_text('{ person(id: "1") { ...Missing } }')
        result = runner.invoke(main, ["list", "-s", schema_file, "-d", str(query)])

        assert result.exit_code == 1
        assert "Unknown fragment 'Missing'" in result.output
