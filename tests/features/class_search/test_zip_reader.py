import io
import zipfile
import pytest
from classfinder.core.errors import ArchiveUnreadable
from classfinder.features.class_search.data.zip_reader import ZipArchiveReader

# --- FIXTURES ---

@pytest.fixture
def opened_files(monkeypatch):
    """
    Records every raw file object zipfile opens, so tests can check
    that each one was closed again.
    """
    handles = []
    original_open = io.open

    def tracking_open(*args, **kwargs):
        handle = original_open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(zipfile.io, "open", tracking_open)
    return handles

# --- TESTS ---

def test_lists_entry_names_in_archive_order(tmp_path, archive_factory):
    names = ["META-INF/MANIFEST.MF", "z/Last.class", "a/First.class"]
    jar = archive_factory(tmp_path / "order.jar", names)

    assert ZipArchiveReader().list_entries(jar) == names

def test_corrupt_archive_raises_unreadable(tmp_path):
    bogus = tmp_path / "broken.jar"
    bogus.write_bytes(b"this is not a zip file at all")

    with pytest.raises(ArchiveUnreadable) as exc_info:
        ZipArchiveReader().list_entries(bogus)

    assert exc_info.value.code == "ARCHIVE_UNREADABLE"
    assert exc_info.value.archive == bogus

def test_missing_archive_raises_unreadable(tmp_path):
    with pytest.raises(ArchiveUnreadable):
        ZipArchiveReader().list_entries(tmp_path / "vanished.ear")

def test_archive_is_closed_after_listing(tmp_path, archive_factory, opened_files):
    jar = archive_factory(tmp_path / "handle.jar", ["x/Y.class"])
    opened_files.clear()

    ZipArchiveReader().list_entries(jar)

    assert [h.name for h in opened_files] == [str(jar)]
    assert all(h.closed for h in opened_files)

def test_corrupt_archive_is_closed_after_failure(tmp_path, opened_files):
    """
    The handle must be released on the failure path as well.
    """
    bogus = tmp_path / "broken.war"
    bogus.write_bytes(b"PK\x03\x04 truncated garbage")
    opened_files.clear()

    with pytest.raises(ArchiveUnreadable):
        ZipArchiveReader().list_entries(bogus)

    assert [h.name for h in opened_files] == [str(bogus)]
    assert all(h.closed for h in opened_files)
