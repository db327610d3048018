import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_HOSTNAME = '127.0.0.1'
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = 'info'

TRACE = 5
NOTICE = 25
logging.addLevelName(TRACE, 'TRACE')
logging.addLevelName(NOTICE, 'NOTICE')

LOG_LEVELS = {
    'trace':    TRACE,
    'debug':    logging.DEBUG,
    'info':     logging.INFO,
    'notice':   NOTICE,
    'warning':  logging.WARNING,
    'error':    logging.ERROR,
    'critical': logging.CRITICAL,
}


@dataclass(frozen=True)
class AppArguments:
    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.log_level is None:
            return
        level = self.log_level.lower()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        object.__setattr__(self, 'log_level', level)


def resolve_log_level(explicit: Optional[str] = None, environ=None) -> int:
    """
    Pick the effective log level: the explicit argument if given, else
    LOG_LEVEL from the environment if it names a known level, else info.
    """
    if environ is None:
        environ = os.environ

    if explicit:
        try:
            return LOG_LEVELS[explicit.lower()]
        except KeyError:
            raise ValueError(f"Unknown log level: {explicit}") from None

    from_env = environ.get('LOG_LEVEL', '').strip().lower()
    if from_env in LOG_LEVELS:
        return LOG_LEVELS[from_env]

    return LOG_LEVELS[DEFAULT_LOG_LEVEL]


def parse_arguments(argv=None) -> AppArguments:
    parser = argparse.ArgumentParser(
        prog='personal-site',
        description='Serve the personal website.'
    )
    parser.add_argument('--hostname', default=DEFAULT_HOSTNAME)
    parser.add_argument('--port', type=int, default=DEFAULT_PORT)
    parser.add_argument('--log-level', choices=sorted(LOG_LEVELS),
                        type=str.lower, default=None)
    args = parser.parse_args(argv)
    return AppArguments(
        hostname=args.hostname,
        port=args.port,
        log_level=args.log_level
    )
