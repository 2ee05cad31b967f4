from graphql import parse

from graphql_to_pydantic.pipeline.schema_ast import (
    EnumDefinition,
    InputObjectDefinition,
    InterfaceDefinition,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDefinition,
    SchemaParser,
    UnionDefinition,
)

SDL = """
scalar DateTime
enum Color { RED GREEN }
union Shape = Circle | Square
interface Node { id: ID! }
type Circle implements Node { id: ID! radius: Float tags: [String!]! }
input Filter { color: Color }
extend type Circle { area: Float }
"""


class TestSchemaParser:
    def setup_method(self):
        self.ast = SchemaParser().parse(parse(SDL))

    def test_definition_kinds_in_document_order(self):
        kinds = [type(d) for d in self.ast.definitions]
        assert kinds == [
            EnumDefinition,
            UnionDefinition,
            InterfaceDefinition,
            ObjectDefinition,
            InputObjectDefinition,
        ]

    def test_positions_follow_document(self):
        assert self.ast.positions() == {"Color": 1, "Shape": 2, "Node": 3, "Circle": 4, "Filter": 5}

    def test_custom_scalars(self):
        assert self.ast.custom_scalars == ["DateTime"]

    def test_enum_values(self):
        assert self.ast.definitions[0].values == ["RED", "GREEN"]

    def test_union_members(self):
        assert self.ast.definitions[1].members == [NamedTypeRef("Circle"), NamedTypeRef("Square")]

    def test_object_fields_and_interfaces(self):
        circle = self.ast.definitions[3]
        assert circle.interfaces == [NamedTypeRef("Node")]
        assert [f.name for f in circle.fields] == ["id", "radius", "tags", "area"]
        assert circle.fields[0].type_ref == NonNullTypeRef(NamedTypeRef("ID"))
        assert circle.fields[2].type_ref == NonNullTypeRef(ListTypeRef(NonNullTypeRef(NamedTypeRef("String"))))

    def test_input_fields(self):
        assert self.ast.definitions[4].fields[0].type_ref == NamedTypeRef("Color")

    def test_parse_sdl(self):
        ast = SchemaParser().parse_sdl("enum A { X }")
        assert ast.definitions == [EnumDefinition(name="A", position=0, values=["X"])]

    def test_extensions_are_not_definitions(self):
        assert [d.name for d in self.ast.definitions] == ["Color", "Shape", "Node", "Circle", "Filter"]


class TestExtensions:
    def parse(self, sdl):
        return {d.name: d for d in SchemaParser().parse_sdl(sdl).definitions}

    def test_object_extension_adds_fields_and_interfaces(self):
        definitions = self.parse(
            """
            interface Node { id: ID! }
            type Circle { radius: Float! }
            extend type Circle implements Node { id: ID! area: Float }
            """
        )
        circle = definitions["Circle"]
        assert [f.name for f in circle.fields] == ["radius", "id", "area"]
        assert circle.interfaces == [NamedTypeRef("Node")]

    def test_extension_before_definition(self):
        definitions = self.parse("extend enum Color { BLUE }\nenum Color { RED }")
        assert definitions["Color"].values == ["RED", "BLUE"]

    def test_union_interface_and_input_extensions(self):
        definitions = self.parse(
            """
            union Shape = Circle
            extend union Shape = Square
            interface Node { id: ID! }
            extend interface Node { createdAt: String }
            input Filter { color: String }
            extend input Filter { size: Int }
            """
        )
        assert definitions["Shape"].members == [NamedTypeRef("Circle"), NamedTypeRef("Square")]
        assert [f.name for f in definitions["Node"].fields] == ["id", "createdAt"]
        assert [f.name for f in definitions["Filter"].fields] == ["color", "size"]

    def test_extension_of_undeclared_type_is_ignored(self):
        definitions = self.parse("type A { x: Int }\nextend type Missing { y: Int }\nextend scalar DateTime @deprecated")
        assert list(definitions) == ["A"]
