# runtime.py
from __future__ import annotations

import sys
from contextvars import ContextVar
from dataclasses import asdict as _asdict
from dataclasses import dataclass, field
from importlib.util import find_spec
from typing import Any

from colorama import Fore, Style

from nearprime.utility import U64_MAX

SHORTCUTS = ("bpsw", "sympy", "none")


@dataclass
class Runtime:
    profile_name: str = "default"
    settings: dict[str, Any] = field(default_factory=dict)
    debug: bool = False  # controls [debug] lines / tracebacks

    def apply(self, settings: Any) -> None:
        self.profile_name = (
            getattr(settings, "name", None)
            or getattr(settings, "_source", None)
            or "default"
        )

        if hasattr(settings, "as_dict") and callable(settings.as_dict):
            cfg = settings.as_dict()
        elif isinstance(settings, dict):
            cfg = settings
        else:
            # grab UPPERCASE attributes from simple objects / modules
            cfg = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}

        try:
            self.settings = dict(cfg)
        except Exception:
            self.settings = _asdict(cfg) if hasattr(cfg, "__dataclass_fields__") else {}

        dbg = self.get("BEHAVIOUR.DEBUG", None)
        if isinstance(dbg, bool):
            self.debug = dbg

    def get(self, key: str, default: Any = None) -> Any:
        """Support dotted lookups, e.g., 'ENGINE.SHORTCUT'."""
        if not key:
            return default
        cur = self.settings
        if isinstance(key, str) and "." in key:
            for part in key.split("."):
                if isinstance(cur, dict) and part in cur:
                    cur = cur[part]
                else:
                    return default
            return cur
        return cur.get(key, default)


# --- Context management ---

_current_runtime: ContextVar[Runtime | None] = ContextVar("nearprime_runtime", default=None)


def current() -> Runtime:
    rt = _current_runtime.get()
    if rt is None:
        rt = Runtime()
        _current_runtime.set(rt)
    return rt


def reset() -> Runtime:
    """Install a fresh default Runtime (profile switch, tests)."""
    rt = Runtime()
    _current_runtime.set(rt)
    return rt


def APPLY(settings: Any) -> None:
    current().apply(settings)


def CFG(key: str, default: Any = None) -> Any:
    return current().get(key, default)


def debug_log(msg: str) -> None:
    """One [debug] line to STDERR when the runtime debug flag is on."""
    if not current().debug:
        return
    sys.stderr.write(f"{Style.DIM}[debug]{Style.RESET_ALL} {msg}\n")
    sys.stderr.flush()


# ---- Engine settings ---------------------------------------------------------

def shortcut_backend() -> str:
    """ENGINE.SHORTCUT normalised to one of SHORTCUTS; unknown values disable it."""
    name = str(CFG("ENGINE.SHORTCUT", "bpsw") or "none").strip().lower()
    return name if name in SHORTCUTS else "none"


def shortcut_limit() -> int:
    try:
        return int(CFG("ENGINE.SHORTCUT_LIMIT", U64_MAX))
    except (TypeError, ValueError):
        return U64_MAX


def trial_limit() -> int:
    """ENGINE.TRIAL_LIMIT; 0 means trial division all the way to sqrt(n)."""
    try:
        return max(0, int(CFG("ENGINE.TRIAL_LIMIT", 1_000_000)))
    except (TypeError, ValueError):
        return 0


# ---- Dependency check --------------------------------------------------------

def ensure_runtime_deps(strict: bool = True) -> bool:
    """
    Verify core runtime deps are available. Uses find_spec() so nothing is
    imported here. If strict=True, prints a friendly error and returns False
    when one is missing.
    """
    required = ("sympy", "gmpy2")
    missing = [name for name in required if find_spec(name) is None]

    if not missing:
        return True

    msg = (
        f"{Fore.RED}{Style.BRIGHT}\nMissing dependencies:{Style.RESET_ALL} "
        + ", ".join(missing)
        + "\nInstall with: "
        + f"{Fore.YELLOW}pip install " + " ".join(missing) + f"{Style.RESET_ALL}"
    )
    print(msg)
    return not strict
