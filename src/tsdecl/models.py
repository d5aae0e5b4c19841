"""Pydantic models for tsdecl descriptors and configuration."""

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator
from pathlib import Path
from typing import Optional
from enum import Enum


# === Type Descriptors ===

class TypeKind(str, Enum):
    """Kind of a host type occurrence."""

    STRING = "string"
    PRIMITIVE = "primitive"
    BOXED_PRIMITIVE = "boxed_primitive"
    ENUM = "enum"
    OBJECT = "object"
    JSON_OBJECT = "json_object"
    JSON_ARRAY = "json_array"
    THROWABLE = "throwable"
    VOID = "void"
    LIST = "list"
    SET = "set"
    MAP = "map"
    API = "api"
    DATA_OBJECT = "data_object"
    HANDLER = "handler"
    FUNCTION = "function"
    ASYNC_RESULT = "async_result"
    CLASS_TYPE = "class_type"
    OTHER = "other"


# Argument count of a parameterized occurrence, per kind
TYPE_ARGUMENT_COUNTS = {
    TypeKind.LIST: 1,
    TypeKind.SET: 1,
    TypeKind.HANDLER: 1,
    TypeKind.ASYNC_RESULT: 1,
    TypeKind.MAP: 2,
    TypeKind.FUNCTION: 2,
}


class TypeDescriptor(BaseModel):
    """One type occurrence from host module metadata.

    ``type_arguments`` is only set for parameterized occurrences
    (``List<String>``); ``type_parameters`` lists the parameter names the raw
    type declares (``T`` for ``List<T>``) and is available either way.
    """

    model_config = ConfigDict(frozen=True)

    kind: TypeKind
    simple_name: str
    name: str  # Qualified name, including type arguments when parameterized
    module_name: Optional[str] = None  # None for types outside generated modules
    type_arguments: Optional[list["TypeDescriptor"]] = None
    type_parameters: list[str] = Field(default_factory=list)
    is_variable: bool = False

    @model_validator(mode="after")
    def check_type_arguments(self) -> "TypeDescriptor":
        """Parameterized collections and callables carry a fixed number of arguments."""
        if self.type_arguments is None:
            return self
        if not self.type_arguments:
            raise ValueError(f"{self.name}: type_arguments must not be empty")
        expected = TYPE_ARGUMENT_COUNTS.get(self.kind)
        if expected is not None and len(self.type_arguments) != expected:
            raise ValueError(
                f"{self.name}: {self.kind.value} takes {expected} type argument(s), "
                f"got {len(self.type_arguments)}"
            )
        return self

    @property
    def is_parameterized(self) -> bool:
        return self.type_arguments is not None

    @property
    def raw_name(self) -> str:
        """Qualified name with any type arguments removed."""
        return self.name.split("<", 1)[0]

    @property
    def raw_simple_name(self) -> str:
        return self.simple_name.split("<", 1)[0]

    @property
    def erased_simple_name(self) -> str:
        return self.raw_simple_name

    def arg(self, index: int) -> "TypeDescriptor":
        """Get a type argument by position."""
        if self.type_arguments is None:
            raise ValueError(f"{self.name} is not parameterized")
        return self.type_arguments[index]


# === Overrides ===

class OverrideEntry(BaseModel):
    """A method-level signature override.

    A bare string in an override document is an argument list replacement;
    an object may replace the argument list, the return type, or both.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    args: Optional[str] = None
    return_type: Optional[str] = Field(default=None, alias="return")
    _structured: bool = PrivateAttr(default=True)

    @classmethod
    def from_args(cls, args: str) -> "OverrideEntry":
        """Build the entry for a bare string override."""
        entry = cls(args=args)
        entry._structured = False
        return entry

    @property
    def structured(self) -> bool:
        return self._structured


# === Scope Registry ===

class RegistryEntry(BaseModel):
    """One row of the npm scope registry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    group: str
    scope: str = ""
    prefix: Optional[str] = None
    strip_prefix: bool = Field(default=False, alias="stripPrefix")
    module: Optional[str] = None
    name: Optional[str] = None

    @field_validator("scope")
    @classmethod
    def normalize_scope(cls, value: str) -> str:
        """Scopes always read as ``@scope/``."""
        if not value:
            return value
        if not value.startswith("@"):
            value = "@" + value
        if not value.endswith("/"):
            value += "/"
        return value


class ModuleInfo(BaseModel):
    """Host module being generated."""

    name: str
    group_package: str


# === Documentation Links ===

class ElementKind(str, Enum):
    """Kind of element a doc link points at."""

    CLASS = "class"
    INTERFACE = "interface"
    METHOD = "method"
    FIELD = "field"
    CONSTRUCTOR = "constructor"
    ENUM_CONSTANT = "enum_constant"
    OTHER = "other"


class DocLink(BaseModel):
    """A ``{@link ...}`` tag resolved against host metadata."""

    model_config = ConfigDict(frozen=True)

    target: TypeDescriptor  # Raw type of the link target
    label: str = ""
    element_kind: ElementKind = ElementKind.CLASS
    element_name: str = ""
    is_gen_enum: bool = True  # False for enums that are not generated


# === Config ===

class GeneratorConfig(BaseModel):
    """Startup configuration for the declaration generator."""

    base_dir: Path = Field(default_factory=Path.cwd)
    scope_registry: list[RegistryEntry] = Field(default_factory=list)
    optional_dependencies: list[str] = Field(default_factory=list)
    class_blacklist: list[str] = Field(default_factory=list)
    diagnostics_log: bool = False  # Persist diagnostics to .tsdecl-logs/
