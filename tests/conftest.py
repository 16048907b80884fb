# Test Fixtures
import pytest
from pathlib import Path
from unittest.mock import Mock

from imglift_core.config import UploadConfig
from imglift_upload.pipeline import RunOrchestrator
from imglift_upload.services.vault import MarkdownDocument, VaultIndex, LocalFileReader


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


@pytest.fixture
def upload_env(monkeypatch):
    monkeypatch.setenv("API_ENDPOINT", "https://img.example.com/upload")
    monkeypatch.setenv("IMAGE_URL_PATH", "data.url")


@pytest.fixture
def upload_config(tmp_path):
    return UploadConfig(
        api_endpoint="https://img.example.com/upload",
        upload_header='{"Authorization": "Bearer secret-token"}',
        upload_body='{"image": "$FILE", "album": "notes"}',
        image_url_path="data.url",
        vault_root=tmp_path,
    )


@pytest.fixture
def vault(tmp_path):
    """Vault with a note folder and a few attachments."""
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "photo.png").write_bytes(PNG_BYTES)
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "diagram.JPG").write_bytes(b"jpeg")
    (tmp_path / "assets" / "notes.txt").write_text("not an image")
    (tmp_path / ".obsidian").mkdir()
    (tmp_path / ".obsidian" / "hidden.png").write_bytes(PNG_BYTES)
    return tmp_path


@pytest.fixture
def make_document(vault):
    def _make(text: str, name: str = "note.md") -> MarkdownDocument:
        path = vault / name
        path.write_text(text, encoding="utf-8")
        return MarkdownDocument.load(path)
    return _make


@pytest.fixture
def stub_uploader():
    uploader = Mock()
    uploader.upload.return_value = "https://host/a1.png"
    return uploader


@pytest.fixture
def orchestrator(vault, stub_uploader):
    index = VaultIndex(vault)
    return RunOrchestrator(
        uploader=stub_uploader,
        index=index,
        reader=LocalFileReader(),
        vault_root=index.root,
    )
