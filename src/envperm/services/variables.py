"""VariableService — persist environment variables to the shell profile.

Pipeline for every write: RESOLVE HOME → OPEN PROFILE → APPEND → RESPOND.
Errors at any stage become a failed ServiceResult; nothing is retried.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from envperm.domain.exports import ExportStyle, format_export
from envperm.infrastructure.profile import (
    HomeDirectoryError,
    append_line,
    find_profile,
    open_profile,
)
from envperm.services.base import BaseService
from envperm.services.result import ServiceResult
from envperm.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from envperm.config.settings import EnvPermSettings

logger = logging.getLogger(__name__)


class VariableService(BaseService):
    """Sets, checks, and extends environment variables in the user's profile.

    Args:
        settings: Home override and profile candidates. Loaded from the
            environment and config file when omitted.
        environ: Mapping consulted by :meth:`check_or_set`. Defaults to
            the live ``os.environ``.
    """

    def __init__(
        self,
        settings: EnvPermSettings | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(settings)
        self._environ = os.environ if environ is None else environ

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def set(self, name: str, value: Any) -> ServiceResult:
        """Append ``export NAME=VALUE`` without checking for an existing value.

        Calling this twice leaves two assignments in the profile; prefer
        :meth:`check_or_set` unless the variable is known to be unset.
        """
        return self._write("set", name, value, ExportStyle.SET)

    @traced
    def check_or_set(self, name: str, value: Any) -> ServiceResult:
        """Set *name* only if it is not already defined in the process environment."""
        op = "check_or_set"
        if name in self._environ:
            logger.debug("%s already set, leaving profile untouched", name)
            return ServiceResult(
                ok=True,
                op=op,
                data={"name": name, "already_set": True, "path": None},
            )

        result = self.set(name, value)
        data = {**result.data, "already_set": False} if result.ok else result.data
        return result.model_copy(update={"op": op, "data": data})

    @traced
    def append(self, name: str, value: Any) -> ServiceResult:
        """Put *value* in front of the current value: ``export NAME="VALUE:$NAME"``."""
        return self._write("append", name, value, ExportStyle.PREPEND)

    @traced
    def append_to_end(self, name: str, value: Any) -> ServiceResult:
        """Put *value* after the current value: ``export NAME="$NAME:VALUE"``."""
        return self._write("append_to_end", name, value, ExportStyle.APPEND)

    @traced
    def profile(self) -> ServiceResult:
        """Report which profile file writes would go to, without creating it."""
        op = "profile"
        try:
            home = self._home()
        except HomeDirectoryError as exc:
            return self._fail(op, "NO_HOME", str(exc))

        cfg = self.settings.profile
        existing = find_profile(home, cfg.candidates)
        path = existing if existing is not None else home / cfg.fallback
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "home": str(home),
                "path": str(path),
                "exists": existing is not None,
                "candidates": list(cfg.candidates),
            },
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write(self, op: str, name: str, value: Any, style: ExportStyle) -> ServiceResult:
        line = format_export(name, value, style)

        # ── RESOLVE HOME ─────────────────────────────────────
        try:
            home = self._home()
        except HomeDirectoryError as exc:
            return self._fail(op, "NO_HOME", str(exc), name=name)

        # ── OPEN PROFILE ─────────────────────────────────────
        cfg = self.settings.profile
        with trace_span("open_profile") as span:
            try:
                path, handle = open_profile(home, cfg.candidates, cfg.fallback)
            except OSError as exc:
                return self._fail(
                    op,
                    "PROFILE_UNAVAILABLE",
                    f"Could not open or create a profile in {home}: {exc.strerror or exc}",
                    home=str(home),
                    errno=exc.errno,
                )
            if span is not None:
                span.annotate("path", str(path))

        # ── APPEND ───────────────────────────────────────────
        try:
            with handle:
                append_line(handle, line)
        except OSError as exc:
            return self._fail(
                op,
                "WRITE_FAILED",
                f"Failed to write {path}: {exc.strerror or exc}",
                path=str(path),
                errno=exc.errno,
            )

        logger.info("Wrote %s to %s", name, path)
        # ── RESPOND ──────────────────────────────────────────
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "value": str(value),
                "line": line,
                "path": str(path),
                "style": str(style),
            },
        )
