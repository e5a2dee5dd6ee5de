"""
Pytest configuration and shared fixtures for the converter tests.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from config import TestingConfig


@pytest.fixture
def app():
    """Create a converter app using the testing config."""
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()
