from notekeeper.conf import MemoryStoreConf


def test_get_set_remove():
    store = MemoryStoreConf().instantiate()
    assert store.get('a') is None
    store.set('a', '1')
    store.set('b', '2')
    store.set('a', '3')
    assert store.get('a') == '3'
    assert sorted(store.keys()) == ['a', 'b']
    store.remove('a')
    assert store.get('a') is None
    assert list(store.keys()) == ['b']


def test_remove_missing_is_noop():
    store = MemoryStoreConf().instantiate()
    store.remove('nothing')
    assert list(store.keys()) == []


def test_preview_mode(capsys):
    store = MemoryStoreConf(preview_mode=True).instantiate()
    store.set('a', '1')
    store.remove('b')
    assert store.data == {}
    out, err = capsys.readouterr()
    assert out == "set 'a': 1\nremove 'b'\n"
