"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Canvas allocates Taichi fields, so the runtime must be up before any
    canvas or render test. Using session scope prevents multiple ti.init()
    calls which can cause segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield
    # Note: We don't call ti.reset() here as it can cause issues
    # with subsequent tests if any cleanup happens after


@pytest.fixture
def default_world():
    """The two concentric spheres world lit from (-10, 10, -10).

    A fresh world per test, so tests may mutate shapes and lights freely.
    """
    from src.whitted.scene.showcase import default_world as make_default_world

    return make_default_world()
