"""Host type descriptor to TypeScript type translation.

``translate`` never fails: types without a TypeScript counterpart degrade to
``any`` (annotated with the host name where useful) and are reported on the
diagnostic channel.
"""
from typing import Optional

from ..logging import DiagnosticLog, UNHANDLED_KIND, UNMAPPED_TYPE, get_diagnostics
from ..models import TypeDescriptor, TypeKind
from .aliases import TYPE_ALIASES

ANY = "any"
ANY_ARRAY = "any[]"
ANY_MAP = "{ [key: string]: any }"


def _unmapped(type_name: str) -> str:
    return f"any /* {type_name} */"


def _primitive(descriptor: TypeDescriptor) -> str:
    if descriptor.simple_name in ("boolean", "Boolean"):
        return "boolean"
    if descriptor.simple_name in ("char", "Character"):
        return "string"
    return "number"


def _api(descriptor: TypeDescriptor, diagnostics: DiagnosticLog) -> str:
    if descriptor.is_parameterized:
        args = ", ".join(translate(t, diagnostics) for t in descriptor.type_arguments)
        base = TYPE_ALIASES.get(descriptor.raw_name, descriptor.raw_simple_name)
        return f"{base}<{args}>"

    # TS has no raw generics, every declared parameter needs an argument
    if descriptor.type_parameters:
        args = ", ".join(ANY for _ in descriptor.type_parameters)
        base = TYPE_ALIASES.get(descriptor.name, descriptor.simple_name)
        return f"{base}<{args}>"

    return TYPE_ALIASES.get(descriptor.raw_name, descriptor.erased_simple_name)


def translate(descriptor: TypeDescriptor, diagnostics: Optional[DiagnosticLog] = None) -> str:
    """Translate a host type descriptor to a TypeScript type expression.

    Args:
        descriptor: Type occurrence to translate.
        diagnostics: Channel for unmapped types. Defaults to the process-wide one.

    Returns:
        TypeScript type text, e.g. ``"{ [key: string]: number[]; }"``.
    """
    if diagnostics is None:
        diagnostics = get_diagnostics()

    kind = descriptor.kind

    if kind == TypeKind.STRING:
        return "string"

    if kind in (TypeKind.PRIMITIVE, TypeKind.BOXED_PRIMITIVE):
        return _primitive(descriptor)

    if kind == TypeKind.ENUM:
        return descriptor.simple_name if descriptor.module_name is not None else ANY

    if kind == TypeKind.OBJECT:
        return descriptor.name if descriptor.is_variable else ANY

    if kind == TypeKind.JSON_OBJECT:
        return ANY_MAP

    if kind == TypeKind.JSON_ARRAY:
        return ANY_ARRAY

    if kind == TypeKind.THROWABLE:
        return "Error"

    if kind == TypeKind.VOID:
        return "void"

    if kind in (TypeKind.LIST, TypeKind.SET):
        if descriptor.is_parameterized:
            return translate(descriptor.arg(0), diagnostics) + "[]"
        return ANY_ARRAY

    if kind == TypeKind.MAP:
        if descriptor.is_parameterized:
            key = translate(descriptor.arg(0), diagnostics)
            value = translate(descriptor.arg(1), diagnostics)
            return f"{{ [key: {key}]: {value}; }}"
        return ANY_MAP

    if kind == TypeKind.API:
        return _api(descriptor, diagnostics)

    if kind == TypeKind.DATA_OBJECT:
        return descriptor.erased_simple_name

    if kind == TypeKind.HANDLER:
        res = translate(descriptor.arg(0), diagnostics) if descriptor.is_parameterized else ANY
        return f"((res: {res}) => void) | Handler<{res}>"

    if kind == TypeKind.FUNCTION:
        if descriptor.is_parameterized:
            arg = translate(descriptor.arg(0), diagnostics)
            ret = translate(descriptor.arg(1), diagnostics)
            return f"(arg: {arg}) => {ret}"
        return "(arg: any) => any"

    if kind == TypeKind.ASYNC_RESULT:
        res = translate(descriptor.arg(0), diagnostics) if descriptor.is_parameterized else ANY
        return f"AsyncResult<{res}>"

    if kind == TypeKind.CLASS_TYPE:
        return "any /* TODO: class */"

    if kind == TypeKind.OTHER:
        if descriptor.name in TYPE_ALIASES:
            return TYPE_ALIASES[descriptor.name]
        diagnostics.report(UNMAPPED_TYPE, descriptor.name)
        return _unmapped(descriptor.name)

    diagnostics.report(UNHANDLED_KIND, f"{descriptor.name} - {kind}")
    return _unmapped(descriptor.name)


def gen_generic(params: list[str]) -> str:
    """Render a generic parameter list.

    Example:
        gen_generic(["K", "V"])  # "<K, V>"
        gen_generic([])  # ""
    """
    if not params:
        return ""
    return "<" + ", ".join(params) + ">"
