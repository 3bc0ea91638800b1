"""
Test loading and saving the JSON data file
"""
import json
import logging

import pytest

from minihub.core import Hub
from minihub.errors import PersistenceError
from minihub.models import Dataset
from minihub.storage import JsonFileStorage


def test_load_creates_missing_file(storage, data_path):
    """A missing file is created with an empty repository list"""
    dataset = storage.load()

    assert dataset.repos == []
    with open(data_path) as f:
        assert json.load(f) == {'repos': []}


def test_load_creates_parent_directory(temp_dir):
    storage = JsonFileStorage(f"{temp_dir}/nested/dir/data.json")
    storage.load()
    with open(f"{temp_dir}/nested/dir/data.json") as f:
        assert json.load(f) == {'repos': []}


def test_corrupt_file_is_reinitialized(storage, data_path, caplog):
    """Unparseable documents are logged and replaced by an empty dataset"""
    with open(data_path, 'w') as f:
        f.write('{"repos": [ this is not json')

    with caplog.at_level(logging.ERROR, logger='minihub.storage.filesystem'):
        dataset = storage.load()

    assert dataset.repos == []
    assert 'reinitializing' in caplog.text
    with open(data_path) as f:
        assert json.load(f) == {'repos': []}


def test_wrong_shape_is_reinitialized(storage, data_path):
    """Valid JSON that is not a dataset is treated like a corrupt file"""
    with open(data_path, 'w') as f:
        json.dump({'repos': 'nope'}, f)

    assert storage.load().repos == []


def test_save_then_load_round_trip(hub, storage):
    """Reloading reproduces the last saved state exactly"""
    repo = hub.create_repo(name='demo', description='d', owner='me', visibility='private')
    a = hub.upsert_file(repo.id, 'a.txt', 'hi', 'first')
    hub.upsert_file(repo.id, 'b.txt', 'there')
    hub.upsert_file(repo.id, 'a.txt', 'hello')
    hub.delete_file(repo.id, a.id)

    reloaded = storage.load()

    assert reloaded == hub.dataset
    assert Hub(storage).list_commits(repo.id)[0].message == 'Delete a.txt'


def test_document_uses_camel_case_fields(hub, data_path):
    repo = hub.create_repo(name='demo')
    hub.upsert_file(repo.id, 'a.txt', 'hi')

    with open(data_path) as f:
        doc = json.load(f)

    stored = doc['repos'][0]
    assert set(stored) == {'id', 'name', 'description', 'owner', 'visibility',
                           'createdAt', 'files', 'commits'}
    assert set(stored['files'][0]) == {'id', 'name', 'content', 'updatedAt'}
    assert set(stored['commits'][1]) == {'id', 'message', 'timestamp', 'filesSnapshot'}
    assert stored['commits'][1]['filesSnapshot'][0]['content'] == 'hi'


def test_loads_document_written_by_hand(storage, data_path):
    """Documents with millisecond 'Z' timestamps are accepted"""
    doc = {
        'repos': [{
            'id': 'abcdefghij',
            'name': 'legacy',
            'description': '',
            'owner': 'guest',
            'visibility': 'public',
            'createdAt': '2024-05-01T10:00:00.000Z',
            'files': [{'id': 'f1', 'name': 'a.txt', 'content': 'x', 'updatedAt': '2024-05-01T10:01:00.000Z'}],
            'commits': [
                {'id': 'c0', 'message': 'Initial commit', 'timestamp': '2024-05-01T10:00:00.000Z', 'filesSnapshot': []},
                {'id': 'c1', 'message': 'Update', 'timestamp': '2024-05-01T10:01:00.000Z',
                 'filesSnapshot': [{'id': 'f1', 'name': 'a.txt', 'content': 'x', 'updatedAt': '2024-05-01T10:01:00.000Z'}]},
            ],
        }]
    }
    with open(data_path, 'w') as f:
        json.dump(doc, f)

    dataset = storage.load()

    repo = dataset.repos[0]
    assert repo.name == 'legacy'
    assert repo.files[0].content == 'x'
    assert repo.commits[1].files_snapshot[0].name == 'a.txt'
    assert repo.created_at.year == 2024


def test_write_failure_raises(temp_dir):
    """Write errors are not swallowed"""
    # A directory where the file should be makes the write fail
    storage = JsonFileStorage(temp_dir)

    with pytest.raises(PersistenceError):
        storage.save(Dataset())
