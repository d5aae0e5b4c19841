"""Reserved TypeScript identifiers."""

RESERVED_WORDS = frozenset({
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    # Strict mode reserved words
    "as",
    "implements",
    "interface",
    "let",
    "package",
    "private",
    "protected",
    "public",
    "static",
    "yield",
})


def clean_reserved(identifier: str) -> str:
    """Escape an identifier that collides with a reserved word.

    Example:
        clean_reserved("class")  # "__class"
        clean_reserved("fooBar")  # "fooBar"
    """
    if identifier in RESERVED_WORDS:
        return "__" + identifier
    return identifier
