import pytest
from notekeeper.conf import SqliteStoreConf


def config(path=':memory:'):
    return SqliteStoreConf(path=path)


def test_init():
    config().instantiate().close()


def test_requires_path():
    with pytest.raises(ValueError, match='`path` must be set'):
        SqliteStoreConf().instantiate()


def test_get_set_remove():
    with config().instantiate() as store:
        assert store.get('a') is None
        store.set('a', '1')
        store.set('b', '2')
        store.set('a', '3')
        assert store.get('a') == '3'
        assert list(store.keys()) == ['a', 'b']
        store.remove('a')
        store.remove('nothing')
        assert store.get('a') is None
        assert list(store.keys()) == ['b']


def test_persists_across_instances(tmp_path):
    path = str(tmp_path / 'notes.sqlite3')
    with config(path).instantiate() as store:
        store.set('note', '{"name": "note", "value": "hi"}')
    with config(path).instantiate() as store:
        assert store.get('note') == '{"name": "note", "value": "hi"}'


def test_preview_mode(tmp_path, capsys):
    path = str(tmp_path / 'notes.sqlite3')
    with SqliteStoreConf(path=path, preview_mode=True).instantiate() as store:
        store.set('a', '1')
        assert store.get('a') is None
    out, err = capsys.readouterr()
    assert out == "set 'a': 1\n"
