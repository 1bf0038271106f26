"""Parser for .NET .resx resource files."""

from pathlib import Path
from typing import Dict

from lxml import etree

from ..errors import MalformedDocumentError
from ..logger import get_logger
from ..models.resource_set import RawNode, ResourceEntry, ResourceSet

logger = get_logger(__name__)

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"


class ResxParser:
    """Parser for .resx files."""

    def parse(self, file_path: str) -> ResourceSet:
        """
        Parse a .resx file and return its string resources.

        Args:
            file_path: Path to the .resx file

        Returns:
            ResourceSet with one entry per string <data> element; every other
            node of the document is kept as a RawNode

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedDocumentError: If the file is not a valid resx document
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            tree = etree.parse(str(path), self._xml_parser())
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(f"Failed to load {file_path} as XML: {e}") from e

        return self._parse_root(tree.getroot())

    def parse_string(self, content: str) -> ResourceSet:
        """
        Parse .resx content from a string.

        Args:
            content: XML string content

        Returns:
            ResourceSet
        """
        try:
            root = etree.fromstring(content.encode("utf-8"), self._xml_parser())
        except etree.XMLSyntaxError as e:
            raise MalformedDocumentError(f"Failed to load resx content as XML: {e}") from e

        return self._parse_root(root)

    def _xml_parser(self) -> etree.XMLParser:
        return etree.XMLParser(remove_blank_text=False, resolve_entities=False)

    def _parse_root(self, root) -> ResourceSet:
        """Parse the <root> element into our model."""
        if root.tag != "root":
            raise MalformedDocumentError(f"Expected a <root> element, got <{root.tag}>")

        resource_set = ResourceSet(headers=self._parse_headers(root))
        headers_seen = False
        last_key = None

        for child in root:
            if child.tag == "resheader":
                headers_seen = True
                continue

            if child.tag == "data":
                entry = self._parse_data(child)
                if entry is not None:
                    # Raises DuplicateKeyError on a repeated name
                    resource_set.append(entry)
                    last_key = entry.key
                    continue

            resource_set.add_raw_node(
                RawNode(
                    xml=etree.tostring(child, encoding="unicode", with_tail=False),
                    key=child.get("name") if child.tag == "data" else None,
                    after=last_key,
                    before_headers=not headers_seen and last_key is None,
                )
            )

        logger.debug(
            "Parsed %d resource entries, %d raw nodes",
            len(resource_set), len(resource_set.raw_nodes),
        )
        return resource_set

    def _parse_headers(self, root) -> Dict[str, str]:
        headers = {}
        for header in root.findall("resheader"):
            name = header.get("name")
            if name:
                headers[name] = header.findtext("value", default="")
        return headers

    def _parse_data(self, data):
        """Parse a single <data> element, or None if it holds no translatable text."""
        name = data.get("name")
        if not name:
            raise MalformedDocumentError(
                f"<data> element without a name on line {data.sourceline}"
            )

        value = data.find("value")
        if value is None:
            return None

        # Binary and file references are not text
        if data.get("type") or data.get("mimetype"):
            logger.debug("Keeping non-string resource %s as-is", name)
            return None

        return ResourceEntry(
            key=name,
            value=value.text or "",
            preserve_whitespace=data.get(XML_SPACE) == "preserve",
            comment=data.findtext("comment"),
        )
