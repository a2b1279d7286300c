"""Tests for geometry helpers."""

import numpy as np
import pytest

from webvis.utils.geometry import extent, frame_camera, normalize


def test_normalize():
    v = normalize(np.array([3.0, 0.0, 4.0]))
    assert v == pytest.approx([0.6, 0.0, 0.8])


def test_normalize_zero_vector():
    v = normalize(np.zeros(3))
    assert np.all(v == 0.0)


def test_extent_uses_largest_axis_span():
    assert extent(np.array([0.0, -2.0, 1.0]), np.array([1.0, 3.0, 2.0])) == 5.0


def test_frame_camera():
    position, target = frame_camera((0.5, 0.0, 0.0), 1.0)
    assert position == (0.5, 0.0, 4.0)
    assert target == (0.5, 0.0, 0.0)


def test_frame_camera_custom_padding():
    position, _ = frame_camera((1.0, 1.0, 1.0), 2.0, padding=0.5)
    assert position == (1.0, 1.0, 3.5)
