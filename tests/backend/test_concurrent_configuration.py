import threading

from locator_lib.services import AlreadyConfiguredError, BindingsBuilder, Registry
from tests.helpers import FileSystem


def test_only_one_concurrent_configuration_wins():
    registry = Registry()
    barrier = threading.Barrier(8)
    installed = []
    rejected = []

    def configure(idx):
        builder = BindingsBuilder(registry).bind_singleton(FileSystem())
        barrier.wait()
        try:
            installed.append((idx, builder.done()))
        except AlreadyConfiguredError:
            rejected.append(idx)

    threads = [threading.Thread(target=configure, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(installed) == 1
    assert len(rejected) == 7
    assert registry.table() is installed[0][1]


def test_concurrent_injects_share_the_singleton():
    registry = Registry()
    shared = FileSystem()
    BindingsBuilder(registry).bind_singleton(shared).done()
    results = []

    def worker():
        for _ in range(100):
            results.append(registry.inject(FileSystem))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert all(r is shared for r in results)
