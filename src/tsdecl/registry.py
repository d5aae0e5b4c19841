"""npm package naming from the scope registry."""
from typing import Optional

from .models import GeneratorConfig, ModuleInfo, RegistryEntry


class ScopeRegistry:
    """Startup-configured npm scope registry and dependency lists."""

    def __init__(
        self,
        entries: list[RegistryEntry],
        optional_dependencies: Optional[list[str]] = None,
        class_blacklist: Optional[list[str]] = None,
    ):
        self.entries = list(entries)
        self.optional_dependencies = frozenset(optional_dependencies or [])
        self.class_blacklist = frozenset(class_blacklist or [])

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "ScopeRegistry":
        return cls(
            config.scope_registry,
            optional_dependencies=config.optional_dependencies,
            class_blacklist=config.class_blacklist,
        )

    def resolve_package_name(self, module: ModuleInfo) -> str:
        """Derive the npm package name for a host module.

        Every entry whose group matches is applied in order, so later entries
        overwrite the scope unconditionally and the name whenever one of their
        rules derives a non-empty one. An explicit module mapping takes
        priority over the prefix rule within the same entry.

        Args:
            module: Module being generated.

        Returns:
            Package name such as ``"@vertx/core"``, or the module name when
            nothing matches.
        """
        scope = ""
        name = ""

        for entry in self.entries:
            if entry.group != module.group_package:
                continue

            scope = entry.scope
            derived = ""

            if entry.prefix is not None and module.name.startswith(entry.prefix):
                if entry.strip_prefix:
                    derived = module.name[len(entry.prefix):]
                else:
                    derived = module.name

            if entry.module is not None and module.name == entry.module and entry.name:
                derived = entry.name

            if derived:
                name = derived

        if not name:
            name = module.name

        return scope + name

    def is_optional_module(self, name: str) -> bool:
        """Check if a module is declared as an optional npm dependency."""
        return name in self.optional_dependencies

    def is_blacklisted_class(self, name: str) -> bool:
        """Check if a class is excluded from generation."""
        return name in self.class_blacklist
