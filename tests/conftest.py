"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

import numpy as np
from PIL import Image


def make_noise_image(seed: int, size: int = 64) -> Image.Image:
    """Create a reproducible random RGB image."""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(size, size, 3), dtype=np.uint8)
    return Image.fromarray(pixels)


def make_pattern_image(size: int = 256) -> Image.Image:
    """Create a smooth, structured grayscale image."""
    y, x = np.mgrid[0:size, 0:size].astype(np.float64) / size
    pixels = 127.5 + 127.5 * np.sin(2 * np.pi * x) * np.cos(3 * np.pi * y)
    return Image.fromarray(pixels.astype(np.uint8)).convert('RGB')


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path):
    """Point user configuration at an empty directory for every test."""
    from simfinder.user_config import get_user_config

    monkeypatch.setenv('SIMFINDER_CONFIG_DIR', str(tmp_path / 'simfinder-config'))
    for var in ('SIMFINDER_THRESHOLD', 'SIMFINDER_WORKERS', 'SIMFINDER_QUEUE_SIZE'):
        monkeypatch.delenv(var, raising=False)
    config = get_user_config()
    config.reload()
    yield config
    config.reload()


@pytest.fixture
def duplicate_dir(temp_dir):
    """
    Directory with three JPEGs.

    Returns:
        dict with paths to:
        - a.jpg, b.jpg (same pixels, identical fingerprints)
        - c.jpg (unrelated content)
    """
    images = {}

    original = make_noise_image(seed=1)
    for name in ('a', 'b'):
        path = temp_dir / f"{name}.jpg"
        original.save(path, 'JPEG', quality=90)
        images[name] = str(path)

    path = temp_dir / "c.jpg"
    make_noise_image(seed=2).save(path, 'JPEG', quality=90)
    images['c'] = str(path)

    return images


@pytest.fixture
def corrupt_dir(duplicate_dir, temp_dir):
    """duplicate_dir plus a .jpg file that is not an image."""
    path = temp_dir / "broken.jpg"
    path.write_bytes(b"this is not a jpeg")
    return str(path)
