import threading

from constlabel.core.cache import GroupCache


class Owner:
    pass


class Other:
    pass


def test_get_put_and_insert_if_absent():
    cache = GroupCache()
    assert cache.get(Owner, "STATUS_") is None

    first = {1: "Active"}
    assert cache.put(Owner, "STATUS_", first) is first
    # A later put keeps the existing entry
    assert cache.put(Owner, "STATUS_", {1: "Other"}) is first
    assert cache.get(Owner, "STATUS_") is first
    assert (Owner, "STATUS_") in cache


def test_entries_are_keyed_per_owner():
    cache = GroupCache()
    cache.put(Owner, "STATUS_", {1: "Owner"})
    cache.put(Other, "STATUS_", {1: "Other"})
    assert cache.get(Owner, "STATUS_") == {1: "Owner"}
    assert cache.get(Other, "STATUS_") == {1: "Other"}
    assert len(cache) == 2


def test_discard_and_clear():
    cache = GroupCache()
    cache.put(Owner, "A_", {})
    cache.put(Owner, "B_", {})
    cache.put(Other, "A_", {})

    assert cache.discard(Owner) == 2
    assert len(cache) == 1
    cache.clear()
    assert len(cache) == 0


def test_concurrent_puts_store_one_mapping():
    cache = GroupCache()
    results = []

    def worker(n):
        results.append(cache.put(Owner, "STATUS_", {1: f"worker {n}"}))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(r) for r in results}) == 1
    assert cache.get(Owner, "STATUS_") is results[0]


class OwnerChild(Owner):
    pass


def test_variants_are_stored_separately():
    cache = GroupCache()
    cache.put(Owner, "STATUS_", {1: "With overrides"}, variant=("Status", "auto"))
    cache.put(Owner, "STATUS_", {1: "Plain"}, variant=("Status", "none"))

    assert cache.get(Owner, "STATUS_", ("Status", "auto")) == {1: "With overrides"}
    assert cache.get(Owner, "STATUS_", ("Status", "none")) == {1: "Plain"}
    assert cache.get(Owner, "STATUS_") is None
    assert (Owner, "STATUS_") in cache
    assert len(cache) == 2


def test_discard_drops_subclass_entries():
    cache = GroupCache()
    cache.put(Owner, "A_", {})
    cache.put(OwnerChild, "A_", {})
    cache.put(Other, "A_", {})

    assert cache.discard(Owner) == 2
    assert (OwnerChild, "A_") not in cache
    assert (Other, "A_") in cache
