import json

import pytest
from PIL import Image


@pytest.fixture
def image_dir(tmp_path):
    """Directory holding a small PNG named pic.png."""
    directory = tmp_path / "images"
    directory.mkdir()
    Image.new("RGB", (100, 50), "red").save(directory / "pic.png")
    return directory


@pytest.fixture
def make_png(tmp_path):
    """Factory writing a PNG of the given pixel size and returning its path."""
    def _make(name="img.png", size=(100, 50)):
        path = tmp_path / name
        Image.new("RGB", size, "blue").save(path)
        return path
    return _make


@pytest.fixture
def scenario_delta():
    """Heading followed by a two-item ordered list."""
    return {"ops": [
        {"insert": "Title"},
        {"insert": "\n", "attributes": {"header": 1}},
        {"insert": "Item A"},
        {"insert": "\n", "attributes": {"list": "ordered"}},
        {"insert": "Item B"},
        {"insert": "\n", "attributes": {"list": "ordered"}},
    ]}


@pytest.fixture
def scenario_json(scenario_delta):
    return json.dumps(scenario_delta)
