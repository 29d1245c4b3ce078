from __future__ import annotations

import threading

from mixdesign.store import RunStore


def test_ids_are_sequential_from_one():
    store = RunStore()
    assert [store.next_id() for _ in range(3)] == [1, 2, 3]


def test_append_keeps_insertion_order_and_all_is_a_copy():
    store = RunStore()
    store.append("a")
    store.append("b")
    snapshot = store.all()
    snapshot.append("c")
    assert store.all() == ["a", "b"]
    assert len(store) == 2


def test_clear_resets_runs_and_counter():
    store = RunStore()
    store.next_id()
    store.append("a")
    store.clear()
    assert len(store) == 0
    assert store.next_id() == 1


def test_concurrent_id_reservation_has_no_duplicates():
    store = RunStore()
    ids = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            i = store.next_id()
            store.append(i)
            with lock:
                ids.append(i)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(ids) == list(range(1, 1601))
    assert sorted(store.all()) == list(range(1, 1601))


def test_separate_stores_are_independent():
    a, b = RunStore(), RunStore()
    a.next_id()
    a.append("x")
    assert b.next_id() == 1
    assert b.all() == []
