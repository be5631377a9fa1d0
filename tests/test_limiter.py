from taestore.buffer.limiter import SizeLimiter


def test_apply_within_limit():
    limiter = SizeLimiter(100)
    assert limiter.apply_quota(30)
    assert limiter.apply_quota(70)
    assert limiter.total() == 100


def test_apply_beyond_limit_is_refused_without_change():
    limiter = SizeLimiter(100)
    assert limiter.apply_quota(60)
    assert limiter.apply_quota(50) is False
    assert limiter.total() == 60


def test_return_quota_round_trip():
    limiter = SizeLimiter(100)
    limiter.apply_quota(80)
    assert limiter.return_quota(80) == 0
    assert limiter.total() == 0


def test_str():
    limiter = SizeLimiter(100)
    limiter.apply_quota(30)
    assert str(limiter) == "<sizeLimiter>[Size=(30/100)]"