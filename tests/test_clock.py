import unittest

from core.clock import Clock, ClockUnderflowError, panel_lines
from fakes import FakeSleep, FakeTerminal


def make_clock(width=100, height=40):
    terminal = FakeTerminal(width, height)
    sleep = FakeSleep()
    return Clock(terminal=terminal, sleep=sleep), terminal, sleep


class TestClockArithmetic(unittest.TestCase):
    def test_one_minute_from_ms(self):
        clock, _, _ = make_clock()
        clock.set_duration_milliseconds(60000)
        self.assertEqual(clock.formatted(), "01:00")

    def test_work_length_from_minutes(self):
        clock, _, _ = make_clock()
        clock.set_duration_minutes(25)
        self.assertEqual(clock.formatted(), "25:00")

    def test_formatted_matches_modulo_rule(self):
        clock, _, _ = make_clock()
        for ms in (0, 999, 1000, 59000, 61500, 754000, 3599000, 3600000, 3661000):
            clock.set_duration_milliseconds(ms)
            expected = f"{(ms // 60000) % 60:02d}:{(ms // 1000) % 60:02d}"
            self.assertEqual(clock.formatted(), expected, ms)

    def test_hour_or_more_truncates_minutes(self):
        clock, _, _ = make_clock()
        clock.set_duration_minutes(61)
        self.assertEqual(clock.formatted(), "01:00")

    def test_sub_second_part_is_dropped(self):
        clock, _, _ = make_clock()
        clock.set_duration_milliseconds(1999)
        self.assertEqual(clock.milliseconds_remaining(), 1000)

    def test_negative_duration_rejected(self):
        clock, _, _ = make_clock()
        with self.assertRaises(ValueError):
            clock.set_duration_milliseconds(-1000)

    def test_decrement_crosses_minute(self):
        clock, _, _ = make_clock()
        clock.set_duration_minutes(5)
        clock.decrement_one_second()
        self.assertEqual(clock.formatted(), "04:59")
        self.assertEqual(clock.milliseconds_remaining(), 299000)

    def test_decrement_at_zero_underflows(self):
        clock, _, _ = make_clock()
        with self.assertRaises(ClockUnderflowError):
            clock.decrement_one_second()
        self.assertEqual(clock.milliseconds_remaining(), 0)

    def test_snapshot(self):
        clock, _, _ = make_clock()
        clock.set_duration_milliseconds(754000)
        snap = clock.snapshot()
        self.assertEqual((snap.minutes, snap.seconds), (12, 34))
        self.assertEqual(snap.formatted, "12:34")


class TestClockRendering(unittest.TestCase):
    def test_panel_is_centred_on_terminal(self):
        clock, terminal, _ = make_clock(width=100, height=40)
        clock.set_duration_minutes(5)
        clock.render_panel()

        moves = [c for c in terminal.calls if c[0] == "move"]
        self.assertEqual(moves[0], ("move", 30, 20))
        self.assertEqual([m[2] for m in moves], list(range(20, 28)))
        self.assertTrue(all(m[1] == 30 for m in moves))
        self.assertEqual(terminal.clears, 1)
        self.assertEqual(terminal.calls[1], ("clear",))

    def test_box_sits_below_blank_margin(self):
        clock, terminal, _ = make_clock(width=100, height=40)
        clock.set_duration_minutes(5)
        clock.render_panel()

        self.assertEqual(terminal.lines[:2], ["", ""])
        box_top = terminal.calls.index(("write", terminal.lines[2]))
        self.assertEqual(terminal.calls[box_top - 1], ("move", 30, 22))
        self.assertTrue(terminal.lines[2].startswith("╭"))
        self.assertEqual(len([c for c in terminal.calls if c[0] == "clear_line"]), 8)

    def test_narrow_terminal_gives_negative_column(self):
        # Known limitation: under 41 columns the panel starts left of the screen.
        clock, terminal, _ = make_clock(width=30, height=10)
        clock.set_duration_minutes(5)
        clock.render_panel()

        moves = [c for c in terminal.calls if c[0] == "move"]
        self.assertEqual(moves[0], ("move", -5, 5))
        self.assertTrue(all(m[1] == -5 for m in moves))

    def test_panel_shows_time(self):
        clock, terminal, _ = make_clock()
        clock.set_duration_milliseconds(754000)
        clock.render_panel()
        self.assertIn("│                 12:34                 │", terminal.lines)

    def test_panel_label_is_always_work(self):
        # Known-suspicious: breaks are drawn with the work label too.
        self.assertIn("│             Time to Work!             │", panel_lines("Time to Work!", "05:00"))
        clock, terminal, _ = make_clock()
        clock.set_duration_minutes(5)
        clock.render_panel()
        self.assertTrue(any("Time to Work!" in line for line in terminal.lines))

    def test_panel_lines_have_fixed_width(self):
        lines = panel_lines("Time to Work!", "25:00")
        self.assertEqual(len(lines), 6)
        self.assertEqual({len(line) for line in lines}, {41})

    def test_size_queried_every_render(self):
        clock, terminal, _ = make_clock(width=100, height=40)
        clock.set_duration_minutes(1)
        clock.render_panel()
        terminal.width, terminal.height = 60, 20
        clock.render_panel()
        moves = [c for c in terminal.calls if c[0] == "move"]
        self.assertEqual(moves[-1], ("move", 10, 17))


class TestCountdown(unittest.TestCase):
    def test_countdown_ticks_exactly_n_times(self):
        clock, terminal, sleep = make_clock()
        clock.set_duration_milliseconds(5000)
        seen = []
        clock.set_on_tick(lambda snap: seen.append(snap.formatted))

        clock.run_countdown()

        self.assertEqual(clock.milliseconds_remaining(), 0)
        self.assertEqual(sleep.calls, [1] * 5)
        self.assertEqual(terminal.clears, 5)
        self.assertEqual(terminal.flushes, 5)
        self.assertEqual(seen, ["00:04", "00:03", "00:02", "00:01", "00:00"])

    def test_countdown_never_goes_negative(self):
        clock, _, _ = make_clock()
        clock.set_duration_minutes(2)
        remaining = []
        clock.set_on_tick(lambda snap: remaining.append(snap.minutes * 60 + snap.seconds))
        clock.run_countdown()
        self.assertEqual(len(remaining), 120)
        self.assertEqual(min(remaining), 0)
        self.assertEqual(remaining, sorted(remaining, reverse=True))

    def test_flush_follows_render(self):
        clock, terminal, _ = make_clock()
        clock.set_duration_milliseconds(1000)
        clock.run_countdown()
        self.assertEqual(terminal.calls[-1], ("flush",))


if __name__ == "__main__":
    unittest.main()
