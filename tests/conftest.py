# File: tests/conftest.py

import pytest
import os
import sys
import zipfile
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())


def make_archive(path: Path, entries) -> Path:
    """Writes a zip-format archive whose entries carry dummy bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for name in entries:
            zf.writestr(name, b"\xca\xfe\xba\xbe")
    return path


@pytest.fixture
def archive_factory():
    return make_archive


@pytest.fixture
def library_tree(tmp_path):
    """
    Creates a small installation layout:
    /lib
      commons-logging.jar   (org/apache/commons/logging/Log.class, LogFactory.class)
      app.WAR               (WEB-INF/classes/com/acme/web/Servlet.class)
    /lib/ext
      acme-core.jar         (com/acme/Foo.class, com/acme/util/Logger.class)
    /classes/com/acme
      Standalone.class
    /docs
      README.txt
    """
    root = tmp_path / "install"

    make_archive(root / "lib" / "commons-logging.jar", [
        "META-INF/MANIFEST.MF",
        "org/apache/commons/logging/Log.class",
        "org/apache/commons/logging/LogFactory.class",
    ])
    make_archive(root / "lib" / "app.WAR", [
        "WEB-INF/web.xml",
        "WEB-INF/classes/com/acme/web/Servlet.class",
    ])
    make_archive(root / "lib" / "ext" / "acme-core.jar", [
        "com/acme/Foo.class",
        "com/acme/util/Logger.class",
    ])

    classes = root / "classes" / "com" / "acme"
    classes.mkdir(parents=True)
    (classes / "Standalone.class").write_bytes(b"\xca\xfe\xba\xbe")

    docs = root / "docs"
    docs.mkdir()
    (docs / "README.txt").write_text("not a candidate")

    return root
