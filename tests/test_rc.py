import gc
import weakref

import pytest

from crusty.rc import Rc


class Payload:
    pass


def test_clone_shares_the_same_object():
    items = ["a"]
    rc = Rc(items)
    other = rc.clone()
    assert other.value is rc.value
    assert rc.value is items


def test_strong_count_tracks_clones_and_drops():
    rc = Rc("x")
    start = rc.strong_count()
    other = rc.clone()
    assert rc.strong_count() == start + 1
    assert other.strong_count() == rc.strong_count()
    other.drop()
    assert rc.strong_count() == start


def test_new_handle_is_alone():
    assert Rc(0).strong_count() == 1


def test_value_released_with_last_handle():
    payload = Payload()
    ref = weakref.ref(payload)
    rc = Rc(payload)
    del payload
    other = rc.clone()
    rc.drop()
    gc.collect()
    assert ref() is other.value
    other.drop()
    gc.collect()
    assert ref() is None


def test_dropped_handle_cannot_be_used():
    rc = Rc(3)
    rc.drop()
    with pytest.raises(RuntimeError):
        rc.value
    with pytest.raises(RuntimeError):
        rc.clone()
    with pytest.raises(RuntimeError):
        rc.strong_count()


def test_double_drop_does_not_affect_other_handles():
    rc = Rc("shared")
    other = rc.clone()
    before = other.strong_count()
    rc.drop()
    rc.drop()
    assert other.strong_count() == before - 1
    assert other.value == "shared"


def test_collected_handle_counts_as_dropped():
    rc = Rc("v")
    start = rc.strong_count()
    other = rc.clone()
    assert rc.strong_count() == start + 1
    del other
    gc.collect()
    assert rc.strong_count() == start