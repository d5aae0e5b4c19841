"""Per-type method signature overrides.

Override documents are optional JSON files named ``<type>.override.json`` in
the generator base directory::

    {
      "close": "(handler?: (res: AsyncResult<void>) => void)",
      "toJson": {"args": "()", "return": "{ [key: string]: any }"}
    }

A bare string replaces the argument list; an object can replace the argument
list and/or the return type.
"""
import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..config import OVERRIDE_SUFFIX
from ..models import OverrideEntry
from ..storage import include_file_if_present


def _parse_document(type_name: str, raw: str) -> dict[str, OverrideEntry]:
    document_name = type_name + OVERRIDE_SUFFIX
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed override document {document_name}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Malformed override document {document_name}: expected an object")

    table = {}
    for method, value in data.items():
        if isinstance(value, str):
            table[method] = OverrideEntry.from_args(value)
        elif isinstance(value, dict):
            try:
                table[method] = OverrideEntry.model_validate(value)
            except ValidationError as e:
                raise ValueError(
                    f"Malformed override for {method} in {document_name}: {e}"
                ) from e
        else:
            raise ValueError(
                f"Malformed override for {method} in {document_name}: "
                f"expected a string or object, got {type(value).__name__}"
            )
    return table


class OverrideRegistry:
    """Lazily loaded override tables, cached for the registry lifetime.

    Owned by the long-lived generator process. A table is loaded the first
    time its type is requested and never reloaded, so later edits to the
    document are not observed.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)
        self._tables: dict[str, dict[str, OverrideEntry]] = {}

    def _table(self, type_name: str) -> dict[str, OverrideEntry]:
        table = self._tables.get(type_name)

        if table is None:
            raw = include_file_if_present(self.base_dir, type_name + OVERRIDE_SUFFIX)
            table = _parse_document(type_name, raw) if raw.strip() else {}
            self._tables[type_name] = table

        return table

    def get_override(self, type_name: str, method: str) -> Optional[OverrideEntry]:
        """Get the override entry for a method, or None for the default signature.

        Raises:
            ValueError: If the type's override document is malformed.
        """
        return self._table(type_name).get(method)

    def get_override_args(self, type_name: str, method: str) -> Optional[str]:
        """Get the replacement argument list text for a method."""
        entry = self.get_override(type_name, method)
        if entry is None:
            return None
        return entry.args

    def get_override_return(self, type_name: str, method: str) -> Optional[str]:
        """Get the replacement return type; bare string overrides have none."""
        entry = self.get_override(type_name, method)
        if entry is None or not entry.structured:
            return None
        return entry.return_type

    def loaded_types(self) -> list[str]:
        return list(self._tables)
