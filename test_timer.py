import pytest

from benchtimer.utils.timer import Timer, TimerError


def test_timer_starts_running(clock):
    timer = Timer(clock)
    assert timer.running
    assert timer.laps == 0


def test_lap_records_running_time(clock):
    timer = Timer(clock)
    clock.advance(0.010)
    timer.lap()
    clock.advance(0.030)
    timer.lap()
    assert timer.laps == 2
    assert timer.mean_lap_time() == pytest.approx(20.0)


def test_paused_time_is_not_counted(clock):
    timer = Timer(clock)
    clock.advance(0.004)
    timer.pause()
    clock.advance(5.0)
    timer.resume()
    clock.advance(0.006)
    assert timer.stop() == pytest.approx(10.0)
    assert not timer.running


def test_millisecs_reports_total_ticks(clock):
    timer = Timer(clock)
    clock.advance(0.25)
    assert timer.millisecs() == pytest.approx(250.0)
    timer.pause()
    clock.advance(1.0)
    assert timer.millisecs() == pytest.approx(250.0)


def test_resume_while_running_raises(clock):
    timer = Timer(clock)
    with pytest.raises(TimerError):
        timer.resume()


def test_pause_twice_raises(clock):
    timer = Timer(clock)
    timer.pause()
    with pytest.raises(TimerError):
        timer.pause()


def test_lap_while_paused_raises(clock):
    timer = Timer(clock)
    timer.pause()
    with pytest.raises(TimerError):
        timer.lap()


def test_mean_without_laps_raises(clock):
    with pytest.raises(TimerError):
        Timer(clock).mean_lap_time()


def test_timer_error_is_runtime_error():
    assert issubclass(TimerError, RuntimeError)


def test_repeat_call_order(clock):
    events = []

    def supplier():
        events.append("supply")
        return 1

    def pre(value):
        events.append("pre")
        return value + 1

    def function(value):
        events.append("run")
        return value * 10

    def post(result):
        events.append(("post", result))

    Timer(clock).repeat(2, supplier, function, pre, post)
    assert events == ["supply", "pre", "run", ("post", 20)] * 2


def test_repeat_times_only_the_function(clock):
    def supplier():
        clock.advance(1.0)
        return None

    def pre(value):
        clock.advance(2.0)
        return value

    def post(result):
        clock.advance(3.0)

    timer = Timer(clock)
    mean = timer.repeat(4, supplier, lambda v: clock.advance(0.002), pre, post)
    assert mean == pytest.approx(2.0)
    assert timer.laps == 4
    assert timer.running


def test_repeat_without_optional_functions(clock):
    received = []
    Timer(clock).repeat(3, lambda: "input", received.append)
    assert received == ["input"] * 3


@pytest.mark.parametrize("n", [0, -1])
def test_repeat_rejects_non_positive_count(clock, n):
    called = []
    with pytest.raises(ValueError):
        Timer(clock).repeat(n, lambda: called.append("supply"), lambda v: None)
    assert called == []


def test_repeat_propagates_function_errors(clock):
    def boom(value):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        Timer(clock).repeat(1, lambda: None, boom)


def test_default_clock_is_monotonic():
    timer = Timer()
    timer.lap()
    assert timer.mean_lap_time() >= 0.0
