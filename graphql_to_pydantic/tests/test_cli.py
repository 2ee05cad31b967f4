import json
from pathlib import Path

from click.testing import CliRunner

from graphql_to_pydantic.graphql_to_pydantic import graphql_to_pydantic


def run(args, schema="enum Color { RED GREEN }", config=None):
    runner = CliRunner()
    with runner.isolated_filesystem():
        Path("schema.graphql").write_text(schema)
        if config is not None:
            Path("config.json").write_text(json.dumps(config))
        result = runner.invoke(graphql_to_pydantic, args)
        output = Path("out.py").read_text() if Path("out.py").exists() else None
    return result, output


class TestCli:
    def test_writes_module(self):
        result, output = run(["schema.graphql", "out.py"])
        assert result.exit_code == 0, result.output
        assert output == "from enum import Enum\n\n\nclass Color(str, Enum):\n    RED = 'RED'\n    GREEN = 'GREEN'\n"

    def test_config_file(self):
        result, output = run(
            ["--config", "config.json", "schema.graphql", "out.py"],
            schema="scalar DateTime\ntype Event { at: DateTime! }",
            config={"scalars": {"DateTime": "int"}},
        )
        assert result.exit_code == 0, result.output
        assert "    at: int" in output

    def test_generation_comment(self):
        result, output = run(["--add-generation-comment", "schema.graphql", "out.py"])
        assert result.exit_code == 0, result.output
        assert output.startswith("# Generated by graphql_to_pydantic schema.graphql out.py --add-generation-comment\n\n")

    def test_invalid_schema(self):
        result, output = run(["schema.graphql", "out.py"], schema="type {")
        assert result.exit_code == 1
        assert "Invalid GraphQL schema" in result.output
        assert output is None

    def test_strict_unresolved_reference(self):
        result, output = run(["--strict", "schema.graphql", "out.py"], schema="type A { b: B }")
        assert result.exit_code == 1
        assert "Unresolved type references: B" in result.output
        assert output is None

    def test_cycle_is_reported(self):
        result, output = run(["schema.graphql", "out.py"], schema="union A = B\nunion B = A")
        assert result.exit_code == 1
        assert "Dependency cycle" in result.output

    def test_keyword_field_is_reported(self):
        result, output = run(["schema.graphql", "out.py"], schema="type Route { from: String }")
        assert result.exit_code == 1
        assert "Route.from is a Python keyword" in result.output
        assert output is None
