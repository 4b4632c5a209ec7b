"""Pytest configuration and fixtures."""

import itertools
import struct

import pytest

from shapeforge.core.display_list import RecordingSurface


@pytest.fixture
def surface():
    """A fresh recording surface with an identity transform."""
    return RecordingSurface()


@pytest.fixture
def half_sampler():
    """Sampler that always returns 0.5, giving zero random displacement."""
    return lambda: 0.5


@pytest.fixture
def sequence_sampler():
    """Factory for samplers returning the given values in order, cycling when exhausted."""
    def make(*values):
        it = itertools.cycle(values)
        return lambda: next(it)
    return make


@pytest.fixture
def pixel_alpha():
    """Reads the alpha of one pixel of an ARGB32 cairo image surface."""
    def read(image_surface, x, y):
        image_surface.flush()
        data = image_surface.get_data()
        offset = y * image_surface.get_stride() + x * 4
        (pixel,) = struct.unpack("=I", bytes(data[offset:offset + 4]))
        return pixel >> 24
    return read
