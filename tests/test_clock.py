from wargrid.clock import Clock


class FakeTimer:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_turn_counting():
    clock = Clock()
    assert clock.turn == 0
    assert clock.new_turn() == 1
    clock.new_turn()
    assert clock.turn == 2


def test_start_resets_turns():
    clock = Clock()
    for _ in range(5):
        clock.new_turn()
    clock.start()
    assert clock.turn == 0


def test_elapsed_ms_uses_timer():
    timer = FakeTimer()
    clock = Clock(timer)
    timer.now = 10.0
    clock.start_timing()
    timer.now = 12.5
    assert clock.elapsed_ms() == 2500


def test_elapsed_is_monotonic_with_real_timer():
    clock = Clock()
    clock.start_timing()
    first = clock.elapsed_ms()
    second = clock.elapsed_ms()
    assert 0 <= first <= second