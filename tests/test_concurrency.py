"""Thread-safety smoke tests for MixinRegistry."""

import threading

from mixinject import MixinRegistry


class Counter:
    def __init__(self):
        self.value = 0


def plus_one(parent):
    class Child(parent):
        def __init__(self):
            super().__init__()
            self.value += 1

    return Child


def run_threads(target, count):
    threads = [threading.Thread(target=target, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_extensions_are_not_lost(registry):
    """Every extension lands even when applied from many threads."""
    registry.register("counter", Counter)
    run_threads(lambda _: registry.extend("counter", plus_one), 16)

    host = {}
    registry.inject("counter", host)
    assert host["counter"].value == 16


def test_concurrent_register_and_inject(registry):
    registry.register("counter", Counter)
    errors = []

    def worker(index):
        try:
            registry.register(f"mixin{index}", Counter)
            host = {}
            registry.inject(["counter", f"mixin{index}"], host)
            assert isinstance(host[f"mixin{index}"], Counter)
        except Exception as exc:  # pragma: no cover - reported below
            errors.append(exc)

    run_threads(worker, 16)
    assert errors == []
    assert len(registry) == 17


def test_constructors_run_outside_the_lock(registry):
    """A constructor may use the registry it is being built from."""
    registry.register("counter", Counter)

    def nested():
        inner = {}
        worker = threading.Thread(target=registry.inject, args=("counter", inner))
        worker.start()
        worker.join(timeout=5)
        return inner

    registry.register("nested", nested)
    host = {}
    registry.inject("nested", host)
    assert isinstance(host["nested"]["counter"], Counter)
