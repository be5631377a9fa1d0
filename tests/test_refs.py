import pytest

from taestore.common.refs import RefHelper


def test_refs_counting_and_underflow():
    helper = RefHelper(refs=0, on_zero_cb=lambda: None)
    assert helper.ref_count() == 0
    helper.ref()
    assert helper.ref_count() == 1
    helper.ref()
    helper.unref()
    assert helper.ref_count() == 1
    helper.unref()
    assert helper.ref_count() == 0
    with pytest.raises(RuntimeError):
        helper.unref()


def test_on_zero_callback_fires_once_per_zero():
    calls = []
    helper = RefHelper(on_zero_cb=lambda: calls.append(True))
    helper.ref()
    helper.ref()
    helper.unref()
    assert calls == []
    helper.unref()
    assert calls == [True]


def test_no_callback_is_fine_at_zero():
    helper = RefHelper()
    helper.ref()
    helper.unref()
    assert helper.ref_count() == 0