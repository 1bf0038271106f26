"""Data models for resource bundles."""

from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, Set

from ..errors import DuplicateKeyError, KeyNotFoundError


@dataclass
class ResourceEntry:
    """A single named string resource."""

    key: str
    value: str
    preserve_whitespace: bool = False
    comment: Optional[str] = None


@dataclass(frozen=True)
class RawNode:
    """
    A document node that is carried through unchanged.

    File references, binary data, value-less <data>, <metadata>,
    <assembly>, the xsd schema and comments of a resx document are kept
    as serialized XML so rewriting the document never loses them.
    """

    xml: str
    key: Optional[str] = None  # name of a <data> node, None for anything else
    after: Optional[str] = None  # key of the preceding entry
    before_headers: bool = False


class ResourceSet:
    """
    Ordered collection of resource entries, addressable by key.

    Insertion order is kept so a loaded bundle serializes back in the
    order it was read. Entries appended later go to the end.

    Raw nodes share the key namespace with entries: a key taken by a
    file reference counts as present and cannot be appended as text.
    """

    def __init__(
        self,
        entries: Optional[List[ResourceEntry]] = None,
        headers: Optional[Dict[str, str]] = None,
        raw_nodes: Optional[List[RawNode]] = None,
    ):
        self._entries: Dict[str, ResourceEntry] = {}
        self._raw_nodes: List[RawNode] = []
        self._raw_keys: Set[str] = set()
        self.headers: Dict[str, str] = dict(headers or {})
        for node in raw_nodes or []:
            self.add_raw_node(node)
        for entry in entries or []:
            self.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ResourceEntry]:
        return iter(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceSet):
            return NotImplemented
        return (
            list(self._entries.values()) == list(other._entries.values())
            and self.headers == other.headers
            and self._raw_nodes == other._raw_nodes
        )

    def __repr__(self) -> str:
        return f"ResourceSet({len(self)} entries, {len(self._raw_nodes)} raw nodes)"

    @property
    def raw_nodes(self) -> List[RawNode]:
        """Nodes kept verbatim, in document order."""
        return list(self._raw_nodes)

    def get(self, key: str) -> Optional[ResourceEntry]:
        """Get the entry for a key, or None."""
        return self._entries.get(key)

    def has_key(self, key: str) -> bool:
        """True if the key names an entry or a raw <data> node."""
        return key in self._entries or key in self._raw_keys

    def append(self, entry: ResourceEntry) -> None:
        """
        Add an entry at the end.

        Raises:
            DuplicateKeyError: If the key is already present
            ValueError: If the key is empty
        """
        if not entry.key:
            raise ValueError("Resource key must not be empty")
        if self.has_key(entry.key):
            raise DuplicateKeyError(entry.key)
        self._entries[entry.key] = entry

    def add_raw_node(self, node: RawNode) -> None:
        """
        Keep a non-translatable node.

        Raises:
            DuplicateKeyError: If the node's key is already present
        """
        if node.key is not None:
            if self.has_key(node.key):
                raise DuplicateKeyError(node.key)
            self._raw_keys.add(node.key)
        self._raw_nodes.append(node)

    def replace_value(self, key: str, value: str) -> None:
        """
        Replace the value of an existing entry, keeping its position.

        Raises:
            KeyNotFoundError: If the key is absent
        """
        if key not in self._entries:
            raise KeyNotFoundError(key)
        self._entries[key] = replace(self._entries[key], value=value)

    def keys(self) -> List[str]:
        """Keys in order."""
        return list(self._entries)

    def missing_keys(self, other: "ResourceSet") -> List[str]:
        """Keys of this set that another set has neither as entry nor raw node."""
        return [key for key in self._entries if not other.has_key(key)]

    def copy(self) -> "ResourceSet":
        """Return an independent copy; entries are not shared."""
        return ResourceSet(
            entries=[replace(entry) for entry in self._entries.values()],
            headers=self.headers,
            raw_nodes=self._raw_nodes,
        )

    @property
    def translatable_count(self) -> int:
        """Number of entries with a non-empty value."""
        return sum(1 for entry in self._entries.values() if entry.value)
