"""
Tests for resx_translator/extraction - resx and JSON loading and saving
"""
from pathlib import Path

import pytest
from lxml import etree

from resx_translator.errors import DuplicateKeyError, MalformedDocumentError
from resx_translator.extraction import (
    JsonResourceParser,
    ResxParser,
    ResxWriter,
    derive_target_path,
    load_resource_set,
    save_resource_set,
)
from resx_translator.models.resource_set import ResourceEntry, ResourceSet


class TestResxParser:

    def test_parse_entries(self, sample_resx_path):
        resource_set = ResxParser().parse(str(sample_resx_path))

        assert resource_set.keys() == ["Greeting", "Welcome", "Empty"]
        greeting = resource_set.get("Greeting")
        assert greeting.value == "Hello"
        assert greeting.preserve_whitespace is True
        assert greeting.comment == "Shown on the home page"
        assert resource_set.get("Welcome").value == "Welcome, <b>{0}</b>!"
        assert resource_set.get("Empty").value == ""
        assert resource_set.get("Empty").preserve_whitespace is False

    def test_value_less_and_file_resources_excluded(self, sample_resx_path):
        resource_set = ResxParser().parse(str(sample_resx_path))
        assert "NoValue" not in resource_set
        assert "Logo" not in resource_set

    def test_headers(self, sample_resx_path):
        resource_set = ResxParser().parse(str(sample_resx_path))
        assert resource_set.headers == {"resmimetype": "text/microsoft-resx", "version": "2.0"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ResxParser().parse(str(tmp_path / "nope.resx"))

    def test_malformed_xml(self):
        with pytest.raises(MalformedDocumentError):
            ResxParser().parse_string("<root><data name='a'><value>x</value></root>")

    def test_wrong_root(self):
        with pytest.raises(MalformedDocumentError):
            ResxParser().parse_string("<resources><string name='a'>x</string></resources>")

    def test_data_without_name(self):
        with pytest.raises(MalformedDocumentError):
            ResxParser().parse_string("<root><data><value>x</value></data></root>")

    def test_duplicate_names(self):
        content = (
            "<root>"
            "<data name='a'><value>1</value></data>"
            "<data name='a'><value>2</value></data>"
            "</root>"
        )
        with pytest.raises(DuplicateKeyError):
            ResxParser().parse_string(content)


class TestResxWriter:

    def test_round_trip(self, sample_resx_path):
        original = ResxParser().parse(str(sample_resx_path))
        parsed = ResxParser().parse_string(ResxWriter().to_string(original))
        assert list(parsed) == list(original)

    def test_output_format(self):
        resource_set = ResourceSet(
            [ResourceEntry("Title", "<b>Hi</b>", preserve_whitespace=True, comment="Header")]
        )
        xml = ResxWriter().to_string(resource_set)

        assert xml.startswith("<?xml")
        assert '<data name="Title" xml:space="preserve">' in xml
        assert "<value>&lt;b&gt;Hi&lt;/b&gt;</value>" in xml
        assert "<comment>Header</comment>" in xml
        assert "text/microsoft-resx" in xml

    def test_loaded_headers_win(self):
        resource_set = ResourceSet(headers={"version": "1.3"})
        parsed = ResxParser().parse_string(ResxWriter().to_string(resource_set))
        assert parsed.headers["version"] == "1.3"
        assert parsed.headers["resmimetype"] == "text/microsoft-resx"

    def test_write_creates_directories(self, tmp_path):
        path = tmp_path / "out" / "Strings.de.resx"
        ResxWriter().write(ResourceSet([ResourceEntry("a", "1")]), str(path))
        assert ResxParser().parse(str(path)).get("a").value == "1"


FULL_RESX = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <!-- Designer notes -->
  <xsd:schema id="root" xmlns="" xmlns:xsd="http://www.w3.org/2001/XMLSchema" xmlns:msdata="urn:schemas-microsoft-com:xml-msdata">
    <xsd:element name="root" msdata:IsDataSet="true" />
  </xsd:schema>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <assembly alias="System.Windows.Forms" name="System.Windows.Forms, Version=4.0.0.0" />
  <data name="a" xml:space="preserve">
    <value>Alpha</value>
  </data>
  <data name="Logo" type="System.Resources.ResXFileRef, System.Windows.Forms">
    <value>logo.png;System.Drawing.Bitmap, System.Drawing</value>
  </data>
  <metadata name="meta1" type="System.Boolean">
    <value>True</value>
  </metadata>
  <data name="b" xml:space="preserve">
    <value>Beta</value>
  </data>
</root>
"""

XSD_SCHEMA = "{http://www.w3.org/2001/XMLSchema}schema"


def _child_names(xml: str):
    """Tag (or name attribute) of every child of <root>, in order."""
    root = etree.fromstring(xml.encode("utf-8"))
    names = []
    for child in root:
        if child.tag is etree.Comment:
            names.append("comment")
        elif child.get("name") and child.tag in ("data", "metadata", "resheader"):
            names.append(child.get("name"))
        else:
            names.append(child.tag)
    return names


class TestRawNodes:
    """Nodes that are not string resources survive a load and save."""

    def test_non_text_nodes_kept(self):
        resource_set = ResxParser().parse_string(FULL_RESX)

        assert resource_set.keys() == ["a", "b"]
        nodes = resource_set.raw_nodes
        assert [node.key for node in nodes] == [None, None, None, "Logo", None]
        assert [node.before_headers for node in nodes] == [True, True, False, False, False]
        assert [node.after for node in nodes] == [None, None, None, "a", "a"]
        assert resource_set.has_key("Logo")
        assert "logo.png" in nodes[3].xml

    def test_value_less_data_kept(self, sample_resx_path):
        resource_set = ResxParser().parse(str(sample_resx_path))
        assert [node.key for node in resource_set.raw_nodes] == ["NoValue", "Logo"]
        assert all(node.after == "Empty" for node in resource_set.raw_nodes)

    def test_document_order_written_back(self):
        xml = ResxWriter().to_string(ResxParser().parse_string(FULL_RESX))

        names = _child_names(xml)
        assert names[:2] == ["comment", XSD_SCHEMA]
        assert names[-5:] == ["assembly", "a", "Logo", "meta1", "b"]
        assert "resmimetype" in names[2:-5]

    def test_rewrite_is_stable(self):
        first = ResxParser().parse_string(FULL_RESX)
        second = ResxParser().parse_string(ResxWriter().to_string(first))

        assert list(second) == list(first)
        assert [node.key for node in second.raw_nodes] == [node.key for node in first.raw_nodes]
        assert [node.after for node in second.raw_nodes] == [node.after for node in first.raw_nodes]

    def test_appended_entries_follow_raw_nodes(self):
        resource_set = ResxParser().parse_string(FULL_RESX)
        resource_set.append(ResourceEntry("c", "Gamma", preserve_whitespace=True))

        names = _child_names(ResxWriter().to_string(resource_set))
        assert names[-6:] == ["assembly", "a", "Logo", "meta1", "b", "c"]

    def test_file_reference_value_untouched(self):
        xml = ResxWriter().to_string(ResxParser().parse_string(FULL_RESX))
        logo = etree.fromstring(xml.encode("utf-8")).find("data[@name='Logo']")
        assert logo.get("type") == "System.Resources.ResXFileRef, System.Windows.Forms"
        assert logo.findtext("value") == "logo.png;System.Drawing.Bitmap, System.Drawing"


class TestJsonResources:

    def test_parse_keeps_order(self):
        resource_set = JsonResourceParser().parse_string('{"b": "2", "a": "1"}')
        assert resource_set.keys() == ["b", "a"]

    @pytest.mark.parametrize("content", ['["a"]', '{"a": 1}', '{"a": {"b": "c"}}', "{not json"])
    def test_malformed(self, content):
        with pytest.raises(MalformedDocumentError):
            JsonResourceParser().parse_string(content)

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "strings.de.json"
        save_resource_set(ResourceSet([ResourceEntry("greeting", "Grüß dich")]), str(path))
        assert "Grüß dich" in path.read_text(encoding="utf-8")
        assert load_resource_set(str(path)).get("greeting").value == "Grüß dich"


class TestDispatch:

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "strings.po"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            load_resource_set(str(path))

    def test_load_resx_by_suffix(self, sample_resx_path):
        assert load_resource_set(str(sample_resx_path)).keys() == ["Greeting", "Welcome", "Empty"]

    @pytest.mark.parametrize(
        "source, language, expected",
        [
            ("res/Strings.en.resx", "de", "res/Strings.de.resx"),
            ("res/Strings.resx", "fr-FR", "res/Strings.fr-FR.resx"),
            ("strings.en-US.json", "it", "strings.it.json"),
            ("/x/MyApp.Resources.en.resx", "de", "/x/MyApp.Resources.de.resx"),
            ("MyApp.Resources.resx", "de", "MyApp.Resources.de.resx"),
            ("Strings.zh-Hans.resx", "fr", "Strings.fr.resx"),
            ("MyApp.UI.resx", "de", "MyApp.UI.de.resx"),
        ],
    )
    def test_derive_target_path(self, source, language, expected):
        assert derive_target_path(source, language) == Path(expected)
