from display import format_time_remaining
from timer import Timer


def test_zero_duration_expires_on_start():
    timer = Timer(0)
    timer.start()
    assert timer.time_up.is_set()
    timer.stop()


def test_countdown_sets_time_up():
    timer = Timer(3, tick_seconds=0.01)
    timer.start()
    assert timer.time_up.wait(timeout=2)
    assert timer.get_remaining() == 0
    timer.stop()


def test_warnings_fire_once_each():
    warnings = []
    timer = Timer(4, on_warning=warnings.append, warning_seconds=(2, 1), tick_seconds=0.01)
    timer.start()
    timer.time_up.wait(timeout=2)
    timer.stop()
    assert warnings == [2, 1]


def test_stop_halts_countdown():
    timer = Timer(600, tick_seconds=0.01)
    timer.start()
    timer.stop()
    assert timer.get_remaining() > 0
    assert not timer.time_up.is_set()


def test_remaining_time_colours():
    assert format_time_remaining(5400) == "[timer_ok]90:00[/timer_ok]"
    assert format_time_remaining(300) == "[timer_warn]05:00[/timer_warn]"
    assert format_time_remaining(65) == "[timer_warn]01:05[/timer_warn]"
    assert format_time_remaining(60) == "[timer_critical]01:00[/timer_critical]"
