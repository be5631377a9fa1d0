from concurrent.futures import ThreadPoolExecutor

import pytest

from taestore.common.mempool import K, M, PAGE_SIZES, Mempool, to_h


def test_pool_alloc_and_free():
    mp = Mempool(M * K * 8)
    n1 = mp.alloc(65)
    assert n1.page_idx == 1
    n2 = mp.alloc(257)
    assert n2.page_idx == 3
    assert mp.usage == n1.size + n2.size

    assert mp.alloc(M * K * 8) is None
    assert mp.apply_quota(M * K * 8) is None

    mp.free(n1)
    assert mp.usage == n2.size
    mp.free(n2)
    assert mp.usage == 0
    mp.free(None)
    assert mp.usage == 0


def test_alloc_rounds_up_to_page_size():
    mp = Mempool()
    node = mp.alloc(65)
    assert node.size == PAGE_SIZES[1]
    assert not node.is_quota
    mp.free(node)


def test_concurrent_alloc_free_leaves_no_usage():
    mp = Mempool(M * K * 8)
    size = K * 4

    def work():
        n = mp.alloc(size)
        if n is not None:
            mp.free(n)

    with ThreadPoolExecutor(max_workers=20) as pool:
        for _ in range(2000):
            pool.submit(work)
    assert mp.usage == 0

    n = mp.alloc(2 * M)
    assert n is not None
    assert mp.other == 1
    mp.free(n)
    assert mp.other == 0

    def quota_work():
        quota = mp.apply_quota(size)
        mp.free(quota)

    with ThreadPoolExecutor(max_workers=20) as pool:
        for _ in range(10):
            pool.submit(quota_work)
    assert mp.usage == 0
    assert mp.quota_usage == 0


def test_quota_accounting():
    mp = Mempool(M)
    quota = mp.apply_quota(1000)
    assert quota.is_quota
    assert quota.size == 1000
    assert mp.quota_usage == 1000
    assert mp.usage == 1000
    mp.free(quota)
    assert mp.usage == 0


def test_page_count_tracks_outstanding_pages():
    mp = Mempool()
    a = mp.alloc(64)
    b = mp.alloc(64)
    assert mp.page_count(0) == 2
    mp.free(a)
    mp.free(b)
    assert mp.page_count(0) == 0


def test_peak_usage_is_kept():
    mp = Mempool()
    a = mp.alloc(M)
    b = mp.alloc(M)
    peak = mp.usage
    mp.free(a)
    mp.free(b)
    assert mp.peak_usage == peak
    assert mp.usage == 0


def test_double_free_is_logic_error():
    mp = Mempool()
    quota = mp.apply_quota(10)
    mp.free(quota)
    with pytest.raises(RuntimeError):
        mp.free(quota)


def test_to_h_units():
    assert to_h(100) == "100 B"
    assert to_h(K) == "1.0000 KB"
    assert to_h(M) == "1.0000 MB"
    assert to_h(K * M) == "1.0000 GB"


def test_string_lists_every_page():
    mp = Mempool(M)
    text = str(mp)
    assert text.startswith("<Mempool>(Cap=1.0000 MB)")
    assert text.count("\nPage: ") == len(PAGE_SIZES) + 1
    assert text.endswith("Page: [UDEF], Count: 0")