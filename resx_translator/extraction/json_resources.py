"""Reader and writer for flat JSON resource files ({"key": "value", ...})."""

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import MalformedDocumentError
from ..models.resource_set import ResourceEntry, ResourceSet


class JsonResourceParser:
    """Parser for flat JSON resource files."""

    def parse(self, file_path: str) -> ResourceSet:
        """
        Parse a JSON resource file.

        Args:
            file_path: Path to the .json file

        Returns:
            ResourceSet in the key order of the document
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(path, "r", encoding="utf-8") as f:
            return self.parse_string(f.read())

    def parse_string(self, content: str) -> ResourceSet:
        """Parse JSON resource content from a string."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError(f"Failed to parse JSON resources: {e}") from e

        return self._parse_data(data)

    def _parse_data(self, data: Any) -> ResourceSet:
        if not isinstance(data, dict):
            raise MalformedDocumentError("Expected a JSON object of key/value pairs")

        resource_set = ResourceSet()
        for key, value in data.items():
            if not isinstance(value, str):
                raise MalformedDocumentError(
                    f"Value of '{key}' must be a string, got {type(value).__name__}"
                )
            resource_set.append(ResourceEntry(key=key, value=value))
        return resource_set


class JsonResourceWriter:
    """Writer for flat JSON resource files."""

    def write(self, resource_set: ResourceSet, output_path: str) -> None:
        """Write a ResourceSet to disk as a JSON object."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self._to_dict(resource_set), f, indent=2, ensure_ascii=False)
            f.write("\n")  # Trailing newline

    def to_string(self, resource_set: ResourceSet) -> str:
        return json.dumps(self._to_dict(resource_set), indent=2, ensure_ascii=False)

    def _to_dict(self, resource_set: ResourceSet) -> Dict[str, str]:
        # Whitespace flags and comments have no JSON representation
        return {entry.key: entry.value for entry in resource_set}
