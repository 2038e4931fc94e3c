import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from sitstand.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler suffixes whose level follows --verbose. The per-run debug log always records everything.
FOLLOWS_VERBOSE = ("persistent", "latest")
DEBUG_RUN_SUFFIX = "debug_run"

# Attaches the handler under `<logger>:<suffix>`, unless one with that name is already there. Returns whether it
# was added, so callers can skip any one-time setup that goes with it.
def _attach(logger: logging.Logger, suffix: str, make_handler, level) -> bool:
    handler_name = f"{logger.name}:{suffix}"
    if any(h.get_name() == handler_name for h in logger.handlers):
        return False
    handler = make_handler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT))
    handler.set_name(handler_name)
    logger.addHandler(handler)
    return True

# Keeps only the `keep` newest per-run debug logs.
def _prune_debug_runs(debug_dir: Path, name: str, keep: int) -> None:
    runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

# Builds the app logger. Everything goes to files, since curses owns the terminal while the reminder runs:
#   <name>.log         rotating, survives across runs
#   latest.log         this run only, overwritten on start
#   debug/<name>_*.log this run at DEBUG, the newest `debug_runs` of them are kept
def get_logger(
        name = "sitstand",
        level = logging.INFO,
        log_dir: Path | None = None,
        max_bytes = 1 * 1024 * 1024,
        backup_count = 3,
        debug_runs: int = 10
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    # Handlers do the filtering, the logger passes everything on.
    logger.setLevel(logging.DEBUG)

    log_dir = log_dir or PATHS.logs
    log_dir.mkdir(parents=True,exist_ok=True)

    _attach(logger, "persistent", lambda: RotatingFileHandler(
        filename=log_dir / f"{name}.log",
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    ), level)
    _attach(logger, "latest", lambda: logging.FileHandler(
        filename=log_dir / "latest.log",
        mode="w",
        encoding="utf-8",
    ), level)

    if debug_runs > 0:
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True,exist_ok=True)
        run_path = debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log"
        if _attach(logger, DEBUG_RUN_SUFFIX, lambda: logging.FileHandler(run_path, encoding="utf-8"), logging.DEBUG):
            _prune_debug_runs(debug_dir, name, debug_runs)

    return logger

# Moves the handlers that follow --verbose to a new level, leaving the per-run debug log alone.
def set_level(logger: logging.Logger, level) -> None:
    for handler in logger.handlers:
        suffix = (handler.get_name() or "").rsplit(":",1)[-1]
        if suffix in FOLLOWS_VERBOSE:
            handler.setLevel(level)

log = get_logger()
log.info("=== INITIALIZED NEW SESSION ===")
