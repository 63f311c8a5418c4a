import threading

from ultimatesim.engine.secret_registry import SecretRegistry, get_secret_registry


def test_register_and_retrieve():
    registry = get_secret_registry()
    text = "The King is dead"
    id1 = registry.register_secret(text)
    assert id1 != 0
    assert registry.get_secret(id1) == text
    assert registry.register_secret(text) == id1
    assert registry.get_secret(9999) is None


def test_singleton_shares_entries():
    first = get_secret_registry()
    secret_id = first.register_secret("Shared rumour")
    second = get_secret_registry()
    assert second.get_secret(secret_id) == "Shared rumour"
    assert second.register_secret("Shared rumour") == secret_id


def test_fresh_registry_starts_at_one():
    registry = SecretRegistry()
    assert registry.register_secret("a") == 1
    assert registry.register_secret("b") == 2
    assert registry.get_secret(0) is None


def test_concurrency():
    registry = SecretRegistry()
    common = "Winter is coming"

    def worker():
        registry.register_secret(common)
        registry.register_secret("Unique text")

    threads = [threading.Thread(target=worker) for _ in range(100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    common_id = registry.register_secret(common)
    unique_id = registry.register_secret("Unique text")
    assert common_id != 0
    assert {common_id, unique_id} == {1, 2}
    assert registry.get_secret(common_id) == common