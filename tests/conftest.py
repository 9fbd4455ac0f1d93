import numpy as np
import pytest
from PIL import Image


class BrokenSink:
    """Text sink whose writes fail for selected payloads."""

    def __init__(self, fail_on=("\n",)):
        self.fail_on = set(fail_on)
        self.written = []

    def write(self, text):
        if text in self.fail_on:
            raise OSError(28, "No space left on device")
        self.written.append(text)
        return len(text)


@pytest.fixture
def broken_sink():
    return BrokenSink


@pytest.fixture
def image_file(tmp_path):
    """Save a grayscale image built from rows of brightness values and return its path."""

    def _make(rows, name="image.png"):
        img = Image.fromarray(np.array(rows, dtype=np.uint8))
        path = tmp_path / name
        img.save(path)
        return path

    return _make
