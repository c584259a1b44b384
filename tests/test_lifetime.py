from s25util.lifetime import LifetimeTracker, set_longevity


def test_destroy_in_ascending_longevity():
    calls = []
    tracker = LifetimeTracker()
    tracker.add(3, lambda: calls.append(3))
    tracker.add(1, lambda: calls.append(1))
    tracker.add(2, lambda: calls.append(2))
    tracker.destroy_all()
    assert calls == [1, 2, 3]
    assert len(tracker) == 0


def test_equal_longevity_keeps_insertion_order():
    calls = []
    tracker = LifetimeTracker()
    tracker.add(5, lambda: calls.append("a"))
    tracker.add(5, lambda: calls.append("b"))
    tracker.add(5, lambda: calls.append("c"))
    tracker.destroy_all()
    assert calls == ["a", "b", "c"]


def test_readd_replaces_entry():
    calls = []

    def first():
        calls.append("first")

    def second():
        calls.append("second")

    tracker = LifetimeTracker()
    tracker.add(1, first)
    tracker.add(2, second)
    tracker.add(10, first)
    assert len(tracker) == 2
    tracker.destroy_all()
    assert calls == ["second", "first"]


def test_destroy_all_twice_calls_once():
    calls = []
    tracker = LifetimeTracker()
    tracker.add(1, lambda: calls.append(1))
    tracker.destroy_all()
    tracker.destroy_all()
    assert calls == [1]


def test_set_longevity_registers_globally():
    calls = []

    def destroy():
        calls.append("done")

    tracker = set_longevity(7, destroy)
    assert destroy in tracker
    assert set_longevity(8, destroy) is tracker
    tracker.destroy_all()
    assert calls == ["done"]
    assert destroy not in tracker