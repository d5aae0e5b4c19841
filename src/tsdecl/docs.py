"""Doc comment rendering for generated declarations."""
from typing import Optional, Union

from .logging import DiagnosticLog, UNHANDLED_LINK_KIND, get_diagnostics
from .models import DocLink, ElementKind, TypeKind

DocToken = Union[str, DocLink]


def render_link(link: DocLink, diagnostics: Optional[DiagnosticLog] = None) -> Optional[str]:
    """Render a ``{@link}`` tag for the generated docs.

    Data objects and generated enums link into the reference pages; other
    module types keep an inline ``{@link}`` marker. Links to types outside
    generated modules render as nothing.

    Args:
        link: Resolved link tag.
        diagnostics: Channel for unsupported element kinds.

    Returns:
        Rendered text, or None if the link should be dropped.
    """
    target = link.target
    if target.module_name is None:
        return None

    simple_name = target.raw_simple_name
    label = link.label.strip()

    if target.kind == TypeKind.DATA_OBJECT:
        return f'<a href="../../dataobjects.html#{simple_name}">{label or simple_name}</a>'

    if target.kind == TypeKind.ENUM and link.is_gen_enum:
        return f'<a href="../../enums.html#{simple_name}">{label or simple_name}</a>'

    if label:
        label = f"[{label}] "

    if link.element_kind in (ElementKind.CLASS, ElementKind.INTERFACE):
        return label + "{@link " + simple_name + "}"
    if link.element_kind == ElementKind.METHOD:
        return label + "{@link " + simple_name + "#" + link.element_name + "}"

    if diagnostics is None:
        diagnostics = get_diagnostics()
    diagnostics.report(UNHANDLED_LINK_KIND, f"{link.element_kind.value} {simple_name}")
    return None


def generate_doc(
    tokens: Optional[list[DocToken]],
    margin: str = "",
    diagnostics: Optional[DiagnosticLog] = None,
) -> str:
    """Flatten doc tokens into a ``/** ... */`` block.

    Args:
        tokens: Text and link tokens, or None when the element has no doc.
        margin: Indentation placed before every line.
        diagnostics: Channel passed through to link rendering.

    Returns:
        The comment block ending in a newline, or "" for no doc.
    """
    if tokens is None:
        return ""

    parts = []
    for token in tokens:
        if isinstance(token, DocLink):
            rendered = render_link(token, diagnostics)
            if rendered is not None:
                parts.append(rendered)
        else:
            parts.append(token)

    lines = [f"{margin}/**"]
    for line in "".join(parts).split("\n"):
        lines.append(f"{margin} * {line}".rstrip() if line else f"{margin} *")
    lines.append(f"{margin} */")
    return "\n".join(lines) + "\n"
