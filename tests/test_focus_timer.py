from datetime import date

from ram.services.focus_timer import FocusTimer, TimerMode


class TestFocusTimer:
    def setup_method(self):
        self.timer = FocusTimer(focus_minutes=25, break_minutes=5)

    def test_initial_state(self):
        assert self.timer.mode is TimerMode.FOCUS
        assert self.timer.seconds_left == 1500
        assert self.timer.remaining_label == "25:00"
        assert not self.timer.is_running

    def test_tick_does_nothing_when_paused(self):
        assert self.timer.tick(10) is None
        assert self.timer.seconds_left == 1500

    def test_tick_counts_down(self):
        self.timer.start()
        assert self.timer.tick(10) is None
        assert self.timer.remaining_label == "24:50"

    def test_focus_completion_logs_session(self):
        self.timer.start()
        completed = self.timer.tick(1500, today=date(2026, 10, 19))

        assert completed.finished is TimerMode.FOCUS
        assert completed.next_mode is TimerMode.BREAK
        assert completed.focus_log.date_key == "2026-10-19"
        assert completed.focus_log.minutes == 25
        assert self.timer.mode is TimerMode.BREAK
        assert self.timer.seconds_left == 300
        assert not self.timer.is_running
        assert self.timer.sessions_completed == 1

    def test_break_completion_returns_to_focus(self):
        self.timer.reset(TimerMode.BREAK)
        self.timer.start()
        completed = self.timer.tick(300)

        assert completed.finished is TimerMode.BREAK
        assert completed.next_mode is TimerMode.FOCUS
        assert completed.focus_log is None
        assert self.timer.mode is TimerMode.FOCUS
        assert self.timer.seconds_left == 1500
        assert self.timer.sessions_completed == 0

    def test_toggle(self):
        self.timer.toggle()
        assert self.timer.is_running
        self.timer.toggle()
        assert not self.timer.is_running

    def test_reset_rewinds_current_phase(self):
        self.timer.start()
        self.timer.tick(100)
        self.timer.reset()
        assert self.timer.seconds_left == 1500
        assert not self.timer.is_running

    def test_custom_durations(self):
        timer = FocusTimer(focus_minutes=50, break_minutes=10)
        timer.start()
        completed = timer.tick(3000, today=date(2026, 10, 19))
        assert completed.focus_log.minutes == 50
        assert timer.seconds_left == 600
