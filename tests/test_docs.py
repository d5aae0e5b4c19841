"""Tests for doc link rendering."""
import pytest
from tsdecl.docs import generate_doc, render_link
from tsdecl.logging import DiagnosticLog, UNHANDLED_LINK_KIND
from tsdecl.models import DocLink, ElementKind, TypeDescriptor, TypeKind


def target(kind: TypeKind, name: str, module: str | None = "vertx-core") -> TypeDescriptor:
    return TypeDescriptor(kind=kind, name=name, simple_name=name.rsplit(".", 1)[-1], module_name=module)


VERTX = target(TypeKind.API, "io.vertx.core.Vertx")
OPTIONS = target(TypeKind.DATA_OBJECT, "io.vertx.core.VertxOptions")
METHOD = target(TypeKind.ENUM, "io.vertx.core.http.HttpMethod")


@pytest.fixture
def diagnostics():
    return DiagnosticLog(quiet=True)


class TestRenderLink:
    """Tests for render_link."""

    def test_data_object(self, diagnostics) -> None:
        link = DocLink(target=OPTIONS)
        assert render_link(link, diagnostics) == (
            '<a href="../../dataobjects.html#VertxOptions">VertxOptions</a>'
        )

    def test_data_object_with_label(self, diagnostics) -> None:
        link = DocLink(target=OPTIONS, label=" the options ")
        assert render_link(link, diagnostics) == (
            '<a href="../../dataobjects.html#VertxOptions">the options</a>'
        )

    def test_generated_enum(self, diagnostics) -> None:
        link = DocLink(target=METHOD)
        assert render_link(link, diagnostics) == '<a href="../../enums.html#HttpMethod">HttpMethod</a>'

    def test_non_generated_enum_is_inline(self, diagnostics) -> None:
        link = DocLink(target=METHOD, is_gen_enum=False, element_kind=ElementKind.CLASS)
        assert render_link(link, diagnostics) == "{@link HttpMethod}"

    def test_class_link(self, diagnostics) -> None:
        assert render_link(DocLink(target=VERTX), diagnostics) == "{@link Vertx}"

    def test_interface_link_with_label(self, diagnostics) -> None:
        link = DocLink(target=VERTX, label="vertx", element_kind=ElementKind.INTERFACE)
        assert render_link(link, diagnostics) == "[vertx] {@link Vertx}"

    def test_method_link(self, diagnostics) -> None:
        link = DocLink(target=VERTX, element_kind=ElementKind.METHOD, element_name="close")
        assert render_link(link, diagnostics) == "{@link Vertx#close}"

    def test_outside_module(self, diagnostics) -> None:
        """Test that links to library types render nothing."""
        link = DocLink(target=target(TypeKind.API, "java.util.List", module=None))
        assert render_link(link, diagnostics) is None

    def test_unhandled_element_kind(self, diagnostics) -> None:
        link = DocLink(target=VERTX, element_kind=ElementKind.FIELD, element_name="x")

        assert render_link(link, diagnostics) is None
        assert diagnostics.events(UNHANDLED_LINK_KIND) == ["field Vertx"]


class TestGenerateDoc:
    """Tests for doc comment blocks."""

    def test_no_doc(self) -> None:
        assert generate_doc(None, "  ") == ""

    def test_text_and_links(self, diagnostics) -> None:
        tokens = [
            "Create a new instance.\n\nSee ",
            DocLink(target=OPTIONS),
            " and ",
            DocLink(target=target(TypeKind.API, "java.lang.Runnable", module=None)),
            "for details.",
        ]
        doc = generate_doc(tokens, "  ", diagnostics)

        assert doc == (
            "  /**\n"
            "   * Create a new instance.\n"
            "   *\n"
            '   * See <a href="../../dataobjects.html#VertxOptions">VertxOptions</a> and for details.\n'
            "   */\n"
        )
