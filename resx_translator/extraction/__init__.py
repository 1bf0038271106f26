"""Resource file loading and saving."""

import re
from pathlib import Path

from ..models.resource_set import ResourceSet
from .json_resources import JsonResourceParser, JsonResourceWriter
from .resx_parser import ResxParser
from .resx_writer import ResxWriter

PARSERS = {".resx": ResxParser, ".json": JsonResourceParser}
WRITERS = {".resx": ResxWriter, ".json": JsonResourceWriter}

# Culture segment of a file name: "en", "de-DE", "zh-Hans", "sr-Latn-RS"
CULTURE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-[A-Za-z0-9]{2,8})*$")


def _format_for(path: Path, table: dict):
    suffix = path.suffix.lower()
    if suffix not in table:
        raise ValueError(
            f"Unsupported resource file type '{suffix}' (expected {', '.join(table)})"
        )
    return table[suffix]()


def load_resource_set(file_path: str) -> ResourceSet:
    """Load a resource file, picking the format from its suffix."""
    path = Path(file_path)
    return _format_for(path, PARSERS).parse(str(path))


def save_resource_set(resource_set: ResourceSet, file_path: str) -> None:
    """Save a resource set, picking the format from the file suffix."""
    path = Path(file_path)
    _format_for(path, WRITERS).write(resource_set, str(path))


def derive_target_path(source_path: str, language: str) -> Path:
    """
    Build the path of a language's resource file next to the source file.

    Strings.en.resx          -> Strings.<language>.resx
    Strings.resx             -> Strings.<language>.resx
    MyApp.Resources.en.resx  -> MyApp.Resources.<language>.resx
    """
    path = Path(source_path)
    base_name = path.stem
    if "." in base_name:
        head, last = base_name.rsplit(".", 1)
        if CULTURE_PATTERN.match(last):
            base_name = head
    return path.with_name(f"{base_name}.{language}{path.suffix}")


__all__ = [
    "JsonResourceParser",
    "JsonResourceWriter",
    "ResxParser",
    "ResxWriter",
    "derive_target_path",
    "load_resource_set",
    "save_resource_set",
]
