"""
Tests for resolving image URLs to local files.
"""

from pathlib import Path

import pytest

from delta2pdf.exceptions import ImagePathNotSet, ImageUrlError
from delta2pdf.images import ImageResolver


class TestFileName:

    @pytest.mark.parametrize("url, name", [
        ("https://example.com/a/b/pic.png", "pic.png"),
        ("https://example.com/pic.png?size=large#top", "pic.png"),
        ("https://example.com/a/../b/pic.jpg", "pic.jpg"),
        ("file:///tmp/uploads/photo.gif", "photo.gif"),
        ("https://example.com/a/b/..", "a"),
    ])
    def test_last_segment(self, url, name):
        assert ImageResolver.file_name(url) == name

    @pytest.mark.parametrize("url", [
        "https://example.com",
        "https://example.com/",
        "https://example.com/images/",
        "https://example.com/a/..",
        "data:image/png;base64,iVBORw0KGgo=",
        "mailto:someone@example.com",
    ])
    def test_no_file_name(self, url):
        with pytest.raises(ImageUrlError):
            ImageResolver.file_name(url)


class TestResolve:

    def test_joins_base_dir(self):
        resolver = ImageResolver("./images")
        assert resolver.resolve("https://example.com/a/b/pic.png") == "./images/pic.png"

    def test_accepts_path_objects(self, tmp_path):
        resolver = ImageResolver()
        resolver.set_base_dir(tmp_path)
        assert resolver.resolve("https://example.com/pic.png") == str(tmp_path / "pic.png")

    def test_base_dir_not_set(self):
        with pytest.raises(ImagePathNotSet):
            ImageResolver().resolve("https://example.com/a/b/pic.png")

    def test_url_error_wins_over_missing_base_dir(self):
        with pytest.raises(ImageUrlError):
            ImageResolver().resolve("https://example.com")

    def test_does_not_touch_the_file(self):
        # Resolution never checks for existence
        resolver = ImageResolver(Path("/nonexistent"))
        assert resolver.resolve("https://example.com/missing.png") == "/nonexistent/missing.png"
