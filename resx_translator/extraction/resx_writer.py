"""Writer for .NET .resx resource files."""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

from lxml import etree

from ..models.resource_set import RawNode, ResourceEntry, ResourceSet
from .resx_parser import XML_SPACE

DEFAULT_HEADERS = {
    "resmimetype": "text/microsoft-resx",
    "version": "2.0",
    "reader": (
        "System.Resources.ResXResourceReader, System.Windows.Forms, "
        "Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089"
    ),
    "writer": (
        "System.Resources.ResXResourceWriter, System.Windows.Forms, "
        "Version=4.0.0.0, Culture=neutral, PublicKeyToken=b77a5c561934e089"
    ),
}

# Kept nodes are re-indented along with the rest of the document
RAW_PARSER = etree.XMLParser(remove_blank_text=True, resolve_entities=False)


class ResxWriter:
    """Writer for .resx files."""

    def write(self, resource_set: ResourceSet, output_path: str) -> None:
        """
        Write a ResourceSet to disk.

        Args:
            resource_set: The ResourceSet to write
            output_path: Path to write the file to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "wb") as f:
            f.write(self._to_bytes(resource_set))

    def to_string(self, resource_set: ResourceSet) -> str:
        """
        Convert a ResourceSet to a resx XML string.

        Args:
            resource_set: The ResourceSet to convert

        Returns:
            XML string representation
        """
        return self._to_bytes(resource_set).decode("utf-8")

    def _to_bytes(self, resource_set: ResourceSet) -> bytes:
        root = etree.Element("root")
        raw_nodes = resource_set.raw_nodes

        for node in raw_nodes:
            if node.before_headers:
                self._append_raw(root, node)

        for name, value in self._headers(resource_set).items():
            header = etree.SubElement(root, "resheader", name=name)
            etree.SubElement(header, "value").text = value

        # Raw nodes follow the entry they followed when read
        anchored: Dict[Optional[str], List[RawNode]] = defaultdict(list)
        for node in raw_nodes:
            if not node.before_headers:
                anchored[node.after].append(node)

        for node in anchored.pop(None, []):
            self._append_raw(root, node)

        for entry in resource_set:
            self._append_data(root, entry)
            for node in anchored.pop(entry.key, []):
                self._append_raw(root, node)

        for nodes in anchored.values():
            for node in nodes:
                self._append_raw(root, node)

        return etree.tostring(
            root, encoding="utf-8", xml_declaration=True, pretty_print=True
        )

    def _headers(self, resource_set: ResourceSet) -> Dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        headers.update(resource_set.headers)
        return headers

    def _append_raw(self, root, node: RawNode) -> None:
        """Append a node kept verbatim from a loaded document."""
        fragment = etree.fromstring(f"<root>{node.xml}</root>", RAW_PARSER)
        for child in list(fragment):
            root.append(child)

    def _append_data(self, root, entry: ResourceEntry) -> None:
        """Append a <data> element for an entry."""
        data = etree.SubElement(root, "data", name=entry.key)
        if entry.preserve_whitespace:
            data.set(XML_SPACE, "preserve")

        etree.SubElement(data, "value").text = entry.value

        if entry.comment:
            etree.SubElement(data, "comment").text = entry.comment
