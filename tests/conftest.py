"""
Pytest configuration and shared fixtures for resx_translator tests.
"""
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from resx_translator.errors import ServiceError
from resx_translator.models.resource_set import ResourceEntry, ResourceSet
from resx_translator.translation.clients.base import TranslationService


SAMPLE_RESX = """<?xml version="1.0" encoding="utf-8"?>
<root>
  <resheader name="resmimetype">
    <value>text/microsoft-resx</value>
  </resheader>
  <resheader name="version">
    <value>2.0</value>
  </resheader>
  <data name="Greeting" xml:space="preserve">
    <value>Hello</value>
    <comment>Shown on the home page</comment>
  </data>
  <data name="Welcome" xml:space="preserve">
    <value>Welcome, &lt;b&gt;{0}&lt;/b&gt;!</value>
  </data>
  <data name="Empty">
    <value></value>
  </data>
  <data name="NoValue" />
  <data name="Logo" type="System.Resources.ResXFileRef, System.Windows.Forms">
    <value>logo.png;System.Drawing.Bitmap, System.Drawing</value>
  </data>
</root>
"""


# ============================================================================
# Fake translation services
# ============================================================================

class RecordingService(TranslationService):
    """Returns text through a transform and records every call."""

    def __init__(
        self,
        transform=None,
        fail_on_call: Optional[int] = None,
        fail_on_text: Iterable[str] = (),
    ):
        self.transform = transform or (lambda text: text)
        self.fail_on_call = fail_on_call
        self.fail_on_text = set(fail_on_text)
        self.calls = []

    @property
    def texts(self):
        return [call[0] for call in self.calls]

    def translate_text(self, text, target_language, source_language="auto"):
        self.calls.append((text, target_language, source_language))
        if len(self.calls) == self.fail_on_call or text in self.fail_on_text:
            raise ServiceError("Quota exceeded", code="quota_exceeded")
        return self.transform(text)


class MappingService(RecordingService):
    """Looks translations up in a dictionary, falling back to the input."""

    def __init__(self, mapping: Dict[str, str], **kwargs):
        super().__init__(transform=lambda text: mapping.get(text, text), **kwargs)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def identity_service() -> RecordingService:
    return RecordingService()


@pytest.fixture
def upper_service() -> RecordingService:
    return RecordingService(transform=str.upper)


@pytest.fixture
def make_service():
    """Factory for services with custom transforms or failures."""
    return RecordingService


@pytest.fixture
def make_mapping_service():
    return MappingService


@pytest.fixture
def make_set():
    """Build a ResourceSet from key/value pairs."""

    def _make(pairs: Dict[str, str], **entry_kwargs) -> ResourceSet:
        return ResourceSet(
            [ResourceEntry(key=k, value=v, **entry_kwargs) for k, v in pairs.items()]
        )

    return _make


@pytest.fixture
def sample_resx_path(tmp_path) -> Path:
    path = tmp_path / "Strings.en.resx"
    path.write_text(SAMPLE_RESX, encoding="utf-8")
    return path


@pytest.fixture
def quiet_env(monkeypatch):
    """Environment for CLI runs without real credentials or log output."""
    monkeypatch.setenv("LOG_MODE", "off")
    monkeypatch.setenv("LOG_FILE", "")
    monkeypatch.setenv("TRANSLATION_PROVIDER", "deepl")
    monkeypatch.setenv("DEEPL_API_KEY", "test-deepl-key")
    monkeypatch.setenv("SOURCE_LANGUAGE", "en")
    monkeypatch.setenv("TARGET_LANGUAGES", "")
    monkeypatch.setenv("RECONCILE_KEEP_PARTIAL", "true")
    monkeypatch.setenv("QUALITY_SKIP_ERRORS", "true")
