"""
Path resolution tests: default file, regular-file check and confinement to the document root.
"""

import os

import pytest

from static_web_server.file_resolver import PathOutsideRootError, confine_path, resolve_path


class TestResolvePath:
    """Test mapping request paths to files"""

    def test_existing_file(self, doc_root):
        assert resolve_path(str(doc_root), "/notes.txt") == str(doc_root / "notes.txt")

    def test_nested_file(self, doc_root):
        assert resolve_path(str(doc_root), "/css/style.css") == str(doc_root / "css" / "style.css")

    def test_root_maps_to_default_file(self, doc_root):
        assert resolve_path(str(doc_root), "/") == str(doc_root / "index.html")

    def test_root_uses_configured_default_file(self, doc_root):
        assert resolve_path(str(doc_root), "/", default_file="notes.txt") == str(doc_root / "notes.txt")

    def test_root_without_default_file_is_not_found(self, doc_root):
        (doc_root / "index.html").unlink()
        assert resolve_path(str(doc_root), "/") is None

    def test_missing_file_is_not_found(self, doc_root):
        assert resolve_path(str(doc_root), "/missing.html") is None

    def test_directory_is_not_found(self, doc_root):
        assert resolve_path(str(doc_root), "/empty") is None
        assert resolve_path(str(doc_root), "/css/") is None

    def test_query_string_is_part_of_the_name(self, doc_root):
        assert resolve_path(str(doc_root), "/notes.txt?x=1") is None

    def test_repeated_slashes_stay_under_root(self, doc_root):
        assert resolve_path(str(doc_root), "//notes.txt") == str(doc_root / "notes.txt")

    def test_nul_byte_is_not_found(self, doc_root):
        assert resolve_path(str(doc_root), "/notes.txt\x00.html") is None

    def test_relative_document_root(self, doc_root, monkeypatch):
        monkeypatch.chdir(doc_root.parent)
        assert resolve_path("www", "/index.html") == os.path.join(str(doc_root), "index.html")


class TestConfinement:
    """Test that resolution never leaves the document root"""

    @pytest.mark.parametrize("path", [
        "/../secret.txt",
        "/css/../../secret.txt",
        "/..",
        "/css/..",
        "/..\\secret.txt",
    ])
    def test_parent_traversal_rejected(self, doc_root, path):
        with pytest.raises(PathOutsideRootError):
            resolve_path(str(doc_root), path)

    @pytest.mark.parametrize("path", [
        "secret.txt",
        "http://example.com/index.html",
        "*",
    ])
    def test_non_origin_form_rejected(self, doc_root, path):
        with pytest.raises(PathOutsideRootError):
            confine_path(str(doc_root), path)

    def test_absolute_looking_path_stays_under_root(self, doc_root):
        candidate = confine_path(str(doc_root), "/etc/passwd")
        assert candidate == os.path.join(str(doc_root), "etc", "passwd")

    def test_dot_segments_stay_under_root(self, doc_root):
        assert confine_path(str(doc_root), "/./css/./style.css") == str(doc_root / "css" / "style.css")

    def test_outside_file_never_resolved(self, doc_root):
        # The file exists, but is one level above the root
        assert (doc_root.parent / "secret.txt").exists()
        with pytest.raises(PathOutsideRootError):
            resolve_path(str(doc_root), "/../secret.txt")
