import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional


DEFAULT_ENV_VAR = "ORIGINLOG_DEBUG_ENABLED"


def _default_progname() -> str:
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return os.path.basename(argv0) or "python"


@dataclass
class LoggerConfig:
    # Environment variable that switches debug logging on at startup
    env_var: str = DEFAULT_ENV_VAR
    # Exact, case-sensitive value counted as "on"; anything else is off
    truthy_token: str = "YES"
    # Start with debug logging on regardless of the environment
    auto_enable: bool = False
    # False mirrors a release build: debug calls become no-ops even when enabled.
    # Tracks __debug__, so `python -O` strips debug output.
    debug_build: bool = __debug__
    # Console prefix, formatted by logging.Formatter; "" disables it
    prefix_format: str = "%(asctime)s.%(msecs)03d %(progname)s[%(process)d] "
    date_format: str = "%Y-%m-%d %H:%M:%S"
    progname: str = field(default_factory=_default_progname)
    # Log file encoding used by redirect_to_file
    encoding: str = "utf-8"
    # Initial value of the debug gate (normally set by from_env)
    enabled: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "LoggerConfig":
        """Build a config whose initial gate comes from the environment.

        An explicit ``enabled=True`` (or ``auto_enable``) wins over the environment.
        """
        cfg = cls(**overrides)
        env = os.environ if environ is None else environ
        cfg.enabled = cfg.enabled or cfg.auto_enable or env_flag(env, cfg.env_var, cfg.truthy_token)
        return cfg


def env_flag(environ: Mapping[str, str], name: str, token: str = "YES") -> bool:
    return environ.get(name) == token


__all__ = ["DEFAULT_ENV_VAR", "LoggerConfig", "env_flag"]
