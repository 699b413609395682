"""Minimal command-line option map with typed getters.

Tokens starting with ``-`` are options (all leading dashes stripped). An
option takes its value either inline (``--level=3``) or from the next token
when that token is not itself an option (``--level 3``). Otherwise it is a
flag with no value. Lookups never raise: a missing option, a flag, or a value
that does not convert gives back the default.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DASH = "-"
EQUAL = "="

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(raw)


class Arguments:
    """Parsed ``name -> value`` map built from a token list."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._options: Dict[str, Optional[str]] = {}
        self._current: Optional[str] = None
        self.positionals: List[str] = []
        for token in argv:
            self._handle(token)
        if self._current is not None:
            self._handle_value(None)

    @classmethod
    def from_sys_argv(cls) -> "Arguments":
        return cls(sys.argv[1:])

    def _handle(self, token: str) -> None:
        name = token.lstrip(DASH).split(EQUAL, 1)[0]
        if token.startswith(DASH) and name:
            self._handle_option(token)
        else:
            self._handle_value(token)

    def _handle_option(self, token: str) -> None:
        if self._current is not None:
            self._handle_value(None)
        name = token.lstrip(DASH)
        if EQUAL in name:
            name, value = name.split(EQUAL, 1)
            self._current = name
            self._handle_value(value)
        else:
            self._current = name

    def _handle_value(self, value: Optional[str]) -> None:
        if self._current is None:
            self.positionals.append(value)
            return
        # First occurrence of an option wins.
        if self._current in self._options:
            logger.debug("duplicate option %r ignored", self._current)
        else:
            self._options[self._current] = value
        self._current = None

    def has(self, option: str) -> bool:
        return option in self._options

    def __contains__(self, option: str) -> bool:
        return self.has(option)

    def raw(self, option: str) -> Optional[str]:
        """Return the unconverted value, ``None`` for flags and missing options."""

        return self._options.get(option)

    def get(
        self,
        option: str,
        cast: Callable[[str], T] = str,
        default: Optional[T] = None,
    ) -> Optional[T]:
        """Return the value of ``option`` converted with ``cast``, else ``default``."""

        value = self.raw(option)
        if value is None:
            return default
        convert = _to_bool if cast is bool else cast
        try:
            return convert(value)
        except (TypeError, ValueError):
            logger.debug("option %r: cannot convert %r", option, value)
            return default

    def as_dict(self) -> Dict[str, Optional[str]]:
        return dict(self._options)
