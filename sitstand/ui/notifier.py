from pathlib import Path
from plyer import notification
from sitstand.common.logger import log
from sitstand.core.machine import Phase
from sitstand.util.misc import format_remaining

APP_NAME = "Sit/Stand Reminder"
TIMEOUT = 10

UP_ICON = Path("/usr/share/icons/HighContrast/32x32/actions/go-up.png")
DOWN_ICON = Path("/usr/share/icons/HighContrast/32x32/actions/go-down.png")

UP_MESSAGE = (
    "   ↑       ↑       ↑\n"
    "  ↑↑↑     ↑↑↑     ↑↑↑\n"
    " ↑↑↑↑↑   ↑↑↑↑↑   ↑↑↑↑↑\n"
    "↑↑↑↑↑↑↑ ↑↑↑↑↑↑↑ ↑↑↑↑↑↑↑"
)
DOWN_MESSAGE = (
    "↓↓↓↓↓↓↓ ↓↓↓↓↓↓↓ ↓↓↓↓↓↓↓\n"
    " ↓↓↓↓↓   ↓↓↓↓↓   ↓↓↓↓↓\n"
    "  ↓↓↓     ↓↓↓     ↓↓↓\n"
    "   ↓       ↓       ↓"
)


# Delivers phase-change reminders as desktop notifications through plyer. Fire-and-forget: a notification that
# can't be shown is logged and otherwise ignored, the timer keeps going either way.
class DesktopNotifier:

    def __init__(self, app_name=APP_NAME, timeout=TIMEOUT):
        self.app_name = app_name
        self.timeout = timeout

    def notify_sitting(self, duration):
        self._send("Sit down!", DOWN_MESSAGE, DOWN_ICON, f"Sitting for {format_remaining(duration)}")

    def notify_standing(self, duration):
        self._send("Stand up!", UP_MESSAGE, UP_ICON, f"Standing for {format_remaining(duration)}")

    # Routes a Notification request coming out of the state machine to the matching method.
    def deliver(self, request):
        if request.phase is Phase.SITTING:
            self.notify_sitting(request.duration)
        else:
            self.notify_standing(request.duration)

    def _send(self, title, art, icon, detail):
        try:
            notification.notify(
                title=title,
                message=f"{art}\n{detail}",
                app_name=self.app_name,
                app_icon=str(icon) if icon.exists() else "",
                timeout=self.timeout,
            )
            log.info(f"Sent notification '{title}' ({detail})")
        except Exception:
            log.warning(f"Could not deliver notification '{title}'",exc_info=True)
