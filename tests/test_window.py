import pytest

from tilesnake import config
from tilesnake.window import Timer, Window


class FakeScheduler:
    def __init__(self):
        self.jobs = {}
        self.counter = 0

    def after(self, ms, func):
        self.counter += 1
        self.jobs[self.counter] = (ms, func)
        return self.counter

    def after_cancel(self, token):
        del self.jobs[token]

    def fire_all(self):
        jobs = list(self.jobs.items())
        self.jobs.clear()
        for _, (_, func) in jobs:
            func()


def test_timer_arms_on_creation():
    scheduler = FakeScheduler()
    timer = Timer(scheduler, 7, config.TEMPO_MS, lambda t: None)
    assert timer.alive()
    assert timer.id() == 7
    assert [ms for ms, _ in scheduler.jobs.values()] == [config.TEMPO_MS]


def test_timer_repeats_and_passes_itself():
    scheduler = FakeScheduler()
    seen = []
    timer = Timer(scheduler, 1, config.TEMPO_MS, seen.append)
    scheduler.fire_all()
    scheduler.fire_all()
    assert seen == [timer, timer]
    assert len(scheduler.jobs) == 1


def test_timer_killed_in_callback_stops():
    scheduler = FakeScheduler()
    calls = []

    def callback(timer):
        calls.append(timer.id())
        timer.kill()

    timer = Timer(scheduler, 3, config.TEMPO_MS, callback)
    scheduler.fire_all()
    assert calls == [3]
    assert not timer.alive()
    assert scheduler.jobs == {}


def test_timer_kill_cancels_and_resets_id():
    scheduler = FakeScheduler()
    timer = Timer(scheduler, 2, config.TEMPO_MS, lambda t: None)
    timer.kill()
    assert scheduler.jobs == {}
    assert timer.id() == 0
    assert not timer.alive()


def test_timer_kill_twice_raises():
    timer = Timer(FakeScheduler(), 2, config.TEMPO_MS, lambda t: None)
    timer.kill()
    with pytest.raises(RuntimeError):
        timer.kill()


def test_timer_rejects_invalid_id_and_interval():
    with pytest.raises(ValueError):
        Timer(FakeScheduler(), 0, config.TEMPO_MS, lambda t: None)
    with pytest.raises(ValueError):
        Timer(FakeScheduler(), 1, -1, lambda t: None)


def test_window_timer_ids_count_up_from_one():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    first = window.set_timer(config.TEMPO_MS, lambda w, t: None)
    second = window.set_timer(config.TEMPO_MS, lambda w, t: None)
    assert first.id() == 1
    assert second.id() == 2
    assert window.has_timer(1) and window.has_timer(2)
    assert window.get_timer(2) is second


def test_window_unknown_timer():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    assert not window.has_timer(1)
    with pytest.raises(KeyError):
        window.get_timer(1)


def test_window_killed_timer_stays_registered():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    timer = window.set_timer(config.TEMPO_MS, lambda w, t: None)
    timer.kill()
    assert window.has_timer(1)
    assert not window.get_timer(1).alive()


def test_fill_rect_and_background():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    window.fill_rect((0, 0, 20, 20), config.GREEN)
    window.fill_rect((20, 0, 40, 20), config.RED)
    window.fill_rect((0, 0, 20, 20), config.RED)
    assert window.painted == {(0, 0, 20, 20): config.RED, (20, 0, 40, 20): config.RED}
    window.fill_background()
    assert window.painted == {}


def test_fill_rect_rejects_inverted_rect():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    with pytest.raises(ValueError):
        window.fill_rect((20, 0, 0, 20), config.RED)


def test_loop_and_message_box_need_shown_window():
    window = Window(config.BOARD_RESOLUTION, config.BOARD_RESOLUTION, "Snake")
    with pytest.raises(RuntimeError):
        window.message_loop()
    with pytest.raises(RuntimeError):
        window.message_box(config.GAME_OVER_CAPTION, "text")