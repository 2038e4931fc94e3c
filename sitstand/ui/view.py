import curses
from sitstand.core.machine import Focus, Phase
from sitstand.util.misc import format_remaining, format_setting

MIN_PANEL_HEIGHT = 3
MIN_PANEL_WIDTH = 12

TIMER_HELP = " Quit <Q>  Pause/Resume <Space>  Restart <H>  Next <L>  Focus <Tab> "
SETTING_HELP = " Decrease <H>  Increase <L> "

# Color pair ids
_PAIR_TIMER = 1
_PAIR_SETTING = 2
_PAIR_FOCUS = 3

_PHASE_TITLES = {
    Phase.SITTING: " SIT DOWN : Sitting ",
    Phase.STANDING: " GET UP : Standing ",
}


def timer_label(snapshot):
    remaining = format_remaining(snapshot.remaining)
    if snapshot.paused:
        return f"[PAUSED] {remaining}"
    return f"{remaining} left"


# Splits a gauge line of the given width into its label, filled and empty parts. The bar gets whatever room is
# left after the label, and the filled share is the ratio clamped to [0, 1].
def gauge_parts(label, ratio, width, fill="━", empty="─"):
    label = label[:max(0, width)]
    bar_width = max(0, width - len(label) - 1)
    ratio = max(0.0, min(1.0, ratio))
    filled = int(round(ratio * bar_width))
    return label, fill * filled, empty * (bar_width - filled)


# Draws a ReminderSnapshot with plain curses: the timer panel on the top half, the two duration settings stacked
# on the bottom half. Nothing here feeds back into the state machine.
class CursesView:

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._colors = False
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
                background = -1
            except curses.error:
                background = curses.COLOR_BLACK
            curses.init_pair(_PAIR_TIMER, curses.COLOR_GREEN, background)
            curses.init_pair(_PAIR_SETTING, curses.COLOR_BLUE, background)
            curses.init_pair(_PAIR_FOCUS, curses.COLOR_YELLOW, background)
            self._colors = True

    def draw(self, snapshot):
        rows, cols = self.stdscr.getmaxyx()
        self.stdscr.erase()

        top = rows // 2
        bottom = rows - top
        half = bottom // 2

        self._panel(
            0, 0, top, cols,
            title=_PHASE_TITLES[snapshot.phase],
            footer=TIMER_HELP,
            label=timer_label(snapshot),
            ratio=snapshot.progress,
            pair=_PAIR_TIMER,
            focused=snapshot.focus is Focus.TIMER,
            fill="═",
        )
        self._panel(
            top, 0, half, cols,
            title=" Sitting duration ",
            footer=SETTING_HELP,
            label=format_setting(snapshot.sitting_duration),
            ratio=snapshot.sitting_fraction,
            pair=_PAIR_SETTING,
            focused=snapshot.focus is Focus.SITTING,
        )
        self._panel(
            top + half, 0, bottom - half, cols,
            title=" Standing duration ",
            footer=SETTING_HELP,
            label=format_setting(snapshot.standing_duration),
            ratio=snapshot.standing_fraction,
            pair=_PAIR_SETTING,
            focused=snapshot.focus is Focus.STANDING,
        )
        self.stdscr.refresh()

    def _attr(self, pair, bold=False):
        attr = curses.color_pair(pair) if self._colors else 0
        return attr | curses.A_BOLD if bold else attr

    def _put(self, y, x, text, attr=0):
        # Writing into the bottom-right cell raises even when the text lands, so curses errors are just clipping.
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def _panel(self, y, x, height, width, title, footer, label, ratio, pair, focused, fill="━"):
        if height < MIN_PANEL_HEIGHT or width < MIN_PANEL_WIDTH:
            self._put(y, x, label[:max(0, width - 1)])
            return

        border = self._attr(_PAIR_FOCUS, bold=True) if focused else 0
        inner = width - 2
        horizontal = "━" if focused else "─"
        self._put(y, x, "┏" if focused else "┌", border)
        self._put(y, x + 1, horizontal * inner, border)
        self._put(y, x + width - 1, "┓" if focused else "┐", border)
        for row in range(y + 1, y + height - 1):
            self._put(row, x, "┃" if focused else "│", border)
            self._put(row, x + width - 1, "┃" if focused else "│", border)
        self._put(y + height - 1, x, "┗" if focused else "└", border)
        self._put(y + height - 1, x + 1, horizontal * inner, border)
        self._put(y + height - 1, x + width - 1, "┛" if focused else "┘", border)

        title = title[:inner]
        self._put(y, x + 1 + (inner - len(title)) // 2, title, curses.A_BOLD | border)
        if height > MIN_PANEL_HEIGHT:
            footer = footer[:inner]
            self._put(y + height - 1, x + 1 + (inner - len(footer)) // 2, footer, border)

        # Gauge sits on the middle row, with a one-cell padding on each side.
        gauge_y = y + height // 2
        text, filled, empty = gauge_parts(label, ratio, inner - 2, fill=fill)
        self._put(gauge_y, x + 2, text, curses.A_BOLD)
        bar_x = x + 2 + len(text) + 1
        self._put(gauge_y, bar_x, filled, self._attr(pair))
        self._put(gauge_y, bar_x + len(filled), empty, curses.A_DIM)
