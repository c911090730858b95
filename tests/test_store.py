from log_explorer.store import LogStore


def test_starts_empty_and_unloaded():
    store = LogStore()
    assert not store.is_loaded
    assert store.entries == ()
    assert len(store) == 0


def test_load_replaces_wholesale(entries):
    store = LogStore()
    store.load(entries)
    store.load(entries[:1])
    assert store.entries == entries[:1]
    assert store.revision == 2


def test_load_takes_a_snapshot(entries):
    source = list(entries)
    store = LogStore()
    store.load(source)
    source.clear()
    assert len(store) == 3


def test_clear(entries):
    store = LogStore()
    store.load(entries)
    store.clear()
    assert not store.is_loaded
    assert store.entries == ()
    assert store.revision == 2


def test_empty_load_is_still_loaded():
    store = LogStore()
    store.load([])
    assert store.is_loaded
