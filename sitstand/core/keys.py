"""Abstract keys and the key -> command mapping.

The terminal layer decodes raw key codes into ``Key`` values; everything from
here on is independent of how keys are actually encoded.
"""

import enum
from dataclasses import dataclass
from sitstand.core.machine import Command, Focus


class Key(enum.Enum):
    QUIT = "quit"
    PAUSE = "pause"
    FORWARD = "forward"
    BACKWARD = "backward"
    DECREMENT = "decrement"
    INCREMENT = "increment"


PRESS = "press"


@dataclass(frozen=True)
class KeyEvent:
    code: object
    kind: str = PRESS


# Turns one key into the command it means right now, or None for keys we don't care about. Pause toggles off the
# machine's paused flag, and the increment/decrement keys mean Next/Reset while the timer panel has focus.
def translate_key(key, machine):
    if key is Key.QUIT:
        return Command.QUIT
    if key is Key.PAUSE:
        return Command.RESUME if machine.paused else Command.PAUSE
    if key is Key.FORWARD:
        return Command.NAVIGATE_FORWARD
    if key is Key.BACKWARD:
        return Command.NAVIGATE_BACKWARD
    if key is Key.DECREMENT:
        return Command.RESET if machine.focus is Focus.TIMER else Command.DECREASE
    if key is Key.INCREMENT:
        return Command.NEXT if machine.focus is Focus.TIMER else Command.INCREASE
    return None
