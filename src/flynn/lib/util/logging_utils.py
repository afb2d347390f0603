"""Utility functions for logging."""


def _log_debug(message: str) -> None:
    """Append a simple debug line to the flynn log.

    Writes timestamped lines to ``state_root()/flynn.log``.  Any IO error is
    ignored so this never raises or changes what the CLI prints.
    """
    try:
        import time

        from ..core.paths import state_root

        log_path = state_root() / "flynn.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
