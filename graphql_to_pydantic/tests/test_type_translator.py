import pytest
from graphql import parse

from graphql_to_pydantic.pipeline.analyzer.type_translator import translate_type
from graphql_to_pydantic.pipeline.backends.imports import ImportFeature
from graphql_to_pydantic.pipeline.config import CodeGeneratorConfig
from graphql_to_pydantic.pipeline.schema_ast import SchemaAST, SchemaParser
from graphql_to_pydantic.pipeline.session import TranslationSession


def field_type(sdl_type, prelude=""):
    """Parse ``type T { f: <sdl_type> }`` and return the field's type reference"""
    ast = SchemaParser().parse(parse(f"{prelude}\ntype T {{ f: {sdl_type} }}"))
    return ast.definitions[-1].fields[0].type_ref


def new_session(custom_scalars=(), scalars=None):
    ast = SchemaAST(custom_scalars=list(custom_scalars))
    return TranslationSession.for_schema(ast, CodeGeneratorConfig(scalars=scalars or {}))


class TestTypeTranslator:
    """Mapping of GraphQL type references to typing expressions"""

    @pytest.mark.parametrize(
        "sdl_type, expected",
        [
            ("String", "Optional[str]"),
            ("String!", "str"),
            ("Int", "Optional[int]"),
            ("Boolean!", "bool"),
            ("Float", "Optional[float]"),
            ("ID!", "str"),
            ("[String]", "Optional[List[Optional[str]]]"),
            ("[String]!", "List[Optional[str]]"),
            ("[String!]", "Optional[List[str]]"),
            ("[String!]!", "List[str]"),
            ("[[Int!]]", "Optional[List[Optional[List[int]]]]"),
            ("User", "Optional['User']"),
            ("User!", "'User'"),
            ("[User!]!", "List['User']"),
        ],
    )
    def test_rendering(self, sdl_type, expected):
        session = new_session()
        result = translate_type(field_type(sdl_type), session)
        assert result.rendered == expected

    def test_id_is_innermost_name(self):
        session = new_session()
        assert translate_type(field_type("[[User!]]!"), session).id == "User"
        assert translate_type(field_type("[String]"), session).id == "str"

    def test_non_null_strips_a_single_optional_layer(self):
        session = new_session()
        scalar = translate_type(field_type("String"), session)
        list_of_scalar = translate_type(field_type("[String]"), session)
        reference = translate_type(field_type("User"), session)

        assert scalar.strip_optional().rendered == "str"
        assert list_of_scalar.strip_optional().rendered == "List[Optional[str]]"
        assert reference.strip_optional().rendered == "'User'"

    def test_strip_is_noop_without_optional(self):
        session = new_session()
        required = translate_type(field_type("String!"), session)
        assert required.strip_optional() == required

    def test_scalar_and_list_flags(self):
        session = new_session()
        translate_type(field_type("[String]"), session)
        assert session.imports.is_registered(ImportFeature.OPTIONAL)
        assert session.imports.is_registered(ImportFeature.LIST)
        assert not session.imports.is_registered(ImportFeature.DYNAMIC)

    def test_custom_scalar_is_dynamic(self):
        session = new_session(custom_scalars=["DateTime"])
        nullable = translate_type(field_type("DateTime", "scalar DateTime"), session)
        required = translate_type(field_type("DateTime!", "scalar DateTime"), session)

        assert nullable.rendered == "Any"
        assert required.rendered == "Any"
        assert nullable.id == "Any"
        assert session.imports.is_registered(ImportFeature.DYNAMIC)
        assert not session.imports.is_registered(ImportFeature.OPTIONAL)

    def test_list_of_custom_scalar(self):
        session = new_session(custom_scalars=["JSON"])
        result = translate_type(field_type("[JSON]", "scalar JSON"), session)
        assert result.rendered == "Optional[List[Any]]"

    def test_configured_scalar_overrides_dynamic(self):
        session = new_session(custom_scalars=["DateTime"], scalars={"DateTime": "str"})
        result = translate_type(field_type("DateTime", "scalar DateTime"), session)
        assert result.rendered == "Optional[str]"

    def test_references_are_remembered(self):
        session = new_session()
        translate_type(field_type("[User]"), session)
        translate_type(field_type("String"), session)
        assert session.referenced == {"User"}

    def test_render_unquoted(self):
        session = new_session()
        result = translate_type(field_type("User!"), session)
        assert result.render(quote_references=False) == "User"
        assert result.is_reference
