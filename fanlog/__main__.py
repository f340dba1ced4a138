# fanlog/__main__.py
"""
Emit one line per level through the configured backends.

    FANLOG_BACKENDS=console,file FANLOG_FILE_PATH=/tmp/demo.log \
    FANLOG_USE_COLORS=true FANLOG_DEBUG_LVL=5 python -m fanlog
"""
import sys
from dotenv import load_dotenv
from rich.traceback import install as install_rich_traceback
from fanlog.api_error import ConfigurationError
from fanlog.config import initialize_config
from fanlog.logger import dispatch as log
from fanlog.logger.logger import get_app_logger


def main() -> int:
    install_rich_traceback(show_locals=False, width=None, extra_lines=3)
    load_dotenv()
    try:
        registry = initialize_config()
    except ConfigurationError as e:
        # Can't use the backends yet, but that's OK - this is a fatal startup error
        print(f"FATAL: Configuration error:\n{e}", file=sys.stderr)
        return 1

    logger = get_app_logger(__name__)
    logger.info("Backends ready", keys=registry.keys())

    log.print_("print level", registry)
    log.info("info level", registry)
    log.warn("warning level", registry)
    log.error("error level", registry)
    for level in (1, 2, 3, 4, 5):
        log.lvl(level, f"debug level {level}", registry)
        log.lvl(-level, f"bright debug level {level}", registry)
    log.lvl(0, "level 0, never colored", registry)

    registry.close_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())
