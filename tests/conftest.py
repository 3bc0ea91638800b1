"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import shutil
import pytest

from minihub.core import Hub
from minihub.storage import JsonFileStorage


@pytest.fixture
def temp_dir():
    """Fixture that provides a temporary directory and cleans it up after test"""
    tmp = tempfile.mkdtemp()
    yield tmp
    shutil.rmtree(tmp)


@pytest.fixture
def data_path(temp_dir):
    return os.path.join(temp_dir, 'data.json')


@pytest.fixture
def storage(data_path):
    return JsonFileStorage(data_path)


@pytest.fixture
def hub(storage):
    """Fixture that provides a hub over an empty data file"""
    return Hub(storage)


@pytest.fixture
def sample_repo(hub):
    """A repository named test-repo with a README"""
    repo = hub.create_repo(name='test-repo', description='Test repository', owner='tester')
    hub.upsert_file(repo.id, 'README.md', '# Test\nTest repository', 'Add README')
    return repo


@pytest.fixture
def app(hub, data_path):
    """
    Create and configure a test Flask app.

    The app serves the same hub the tests use, so state created through
    the hub is visible to requests and vice versa.
    """
    from minihub.app import create_app

    flask_app = create_app({'TESTING': True, 'DATA_PATH': data_path}, hub=hub)
    yield flask_app


@pytest.fixture
def client(app):
    """
    Create a Flask test client.

    This fixture provides a test client for making HTTP requests to the Flask app.
    Automatically depends on the 'app' fixture.
    """
    return app.test_client()
