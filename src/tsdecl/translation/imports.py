"""Per-session import tracking for generated declarations."""
from typing import Iterator, Optional

from ..models import TypeDescriptor


class ImportSession:
    """Types already referenced during one generation run.

    Keys are ``"<module>/<SimpleName>"``; the first descriptor seen for a key
    is kept. Create one session per output file and never share it between
    runs.
    """

    def __init__(self) -> None:
        self._seen: dict[str, TypeDescriptor] = {}

    @staticmethod
    def key_for(descriptor: TypeDescriptor) -> str:
        return f"{descriptor.module_name}/{descriptor.simple_name}"

    def get(self, key: str) -> Optional[TypeDescriptor]:
        return self._seen.get(key)

    def keys(self) -> list[str]:
        return list(self._seen)

    def add(self, descriptor: TypeDescriptor) -> bool:
        """Record a descriptor, returning False if its key was already present."""
        key = self.key_for(descriptor)
        if key in self._seen:
            return False
        self._seen[key] = descriptor
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[str]:
        return iter(self._seen)


def is_imported(descriptor: TypeDescriptor, session: ImportSession) -> bool:
    """Check whether a type is already visible in the current output.

    Types outside generated modules are ambient and always visible. For module
    types the first reference in a session returns False (the caller must emit
    an import) and every later one returns True.
    """
    if descriptor.module_name is None:
        return True

    return not session.add(descriptor)
