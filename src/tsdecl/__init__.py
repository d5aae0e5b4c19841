"""tsdecl - TypeScript declaration type mapping.

tsdecl maps host type descriptors (primitives, generics, collections,
handlers, API classes, data objects) to TypeScript type expressions and keeps
the side tables a declaration generator needs while emitting signatures:
reserved words, method overrides, per-file imports and npm scopes.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
