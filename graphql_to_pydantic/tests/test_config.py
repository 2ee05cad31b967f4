from graphql_to_pydantic import CodeGeneratorConfig


class TestConfig:
    def test_defaults(self):
        config = CodeGeneratorConfig()
        assert config.scalars == {}
        assert config.reserved_field_names == ["copy"]
        assert config.alias_suffix == "_"
        assert config.strict_references is False
        assert config.add_generation_comment is False

    def test_from_dict_ignores_unknown_keys(self):
        config = CodeGeneratorConfig.from_dict({"strict_references": True, "unknown": 1})
        assert config.strict_references is True
        assert not hasattr(config, "unknown")

    def test_round_trip(self):
        data = {
            "scalars": {"DateTime": "str"},
            "reserved_field_names": ["copy", "json"],
            "alias_suffix": "_field",
            "strict_references": True,
            "add_generation_comment": True,
        }
        assert CodeGeneratorConfig.from_dict(data).to_dict() == data

    def test_defaults_are_not_shared(self):
        first = CodeGeneratorConfig()
        first.reserved_field_names.append("json")
        assert CodeGeneratorConfig().reserved_field_names == ["copy"]
