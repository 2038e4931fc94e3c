import curses
from sitstand.common.logger import log
from sitstand.core.config import POLL_INTERVAL
from sitstand.core.keys import PRESS, Key, KeyEvent, translate_key
from sitstand.core.machine import ReminderStateMachine
from sitstand.ui.notifier import DesktopNotifier
from sitstand.ui.view import CursesView

_TAB = 9

# Raw curses key codes -> abstract keys
KEYMAP = {
    ord("q"): Key.QUIT,
    ord("Q"): Key.QUIT,
    ord(" "): Key.PAUSE,
    _TAB: Key.FORWARD,
    curses.KEY_DOWN: Key.FORWARD,
    curses.KEY_BTAB: Key.BACKWARD,
    curses.KEY_UP: Key.BACKWARD,
    ord("h"): Key.DECREMENT,
    ord("H"): Key.DECREMENT,
    curses.KEY_LEFT: Key.DECREMENT,
    ord("l"): Key.INCREMENT,
    ord("L"): Key.INCREMENT,
    curses.KEY_RIGHT: Key.INCREMENT,
}


# Key source on top of a curses window. poll() blocks for at most `timeout` seconds waiting for a key and holds on
# to it until read() hands it out. curses only reports key presses, so every event is a press.
class CursesInput:

    def __init__(self, stdscr, keymap=None):
        self.stdscr = stdscr
        self.keymap = KEYMAP if keymap is None else keymap
        self._pending = None
        self.stdscr.keypad(True)

    def poll(self, timeout):
        if self._pending is not None:
            return True
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        ch = self.stdscr.getch()
        if ch == -1:
            return False
        self._pending = ch
        return True

    def read(self):
        ch, self._pending = self._pending, None
        return KeyEvent(self.keymap.get(ch, ch), PRESS)


# Applies a command and every follow-up it produces, handing notification requests to the notifier as they come
# out. Nothing else gets to look at the machine until the whole chain is done.
def process(machine, command, notifier):
    while command is not None:
        step = machine.apply(command)
        for request in step.notifications:
            notifier.deliver(request)
        command = step.follow_up


# The host loop: render, wait for a key (this wait is the tick interval), check whether the active phase ran out,
# then apply whatever the key meant. Runs until the machine is finished.
def run_loop(machine, source, view, notifier, poll_interval=POLL_INTERVAL):
    while not machine.finished:
        view.draw(machine.snapshot())

        event = source.read() if source.poll(poll_interval) else None

        process(machine, machine.tick(), notifier)

        if event is None or event.kind != PRESS:
            continue
        command = translate_key(event.code, machine)
        if command is None:
            log.debug(f"Ignoring unmapped key {event.code!r}")
            continue
        process(machine, command, notifier)

    log.info("Reminder loop finished")


def _curses_main(stdscr, machine, notifier, poll_interval):
    run_loop(machine, CursesInput(stdscr), CursesView(stdscr), notifier, poll_interval)


def main(schedule, poll_interval=POLL_INTERVAL, notifier=None):
    sitting, standing = schedule.initial_durations()
    machine = ReminderStateMachine(sitting_duration=sitting, standing_duration=standing)
    notifier = notifier or DesktopNotifier()
    log.info(f"Starting reminder with sitting={sitting}s, standing={standing}s, poll={poll_interval}s")
    # wrapper() puts the terminal back the way it found it, even if the loop raises.
    curses.wrapper(_curses_main, machine, notifier, poll_interval)
    return machine
