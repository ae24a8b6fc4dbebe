"""BaseService — shared foundation for envperm services.

Every service receives an :class:`EnvPermSettings` at construction time
and resolves the home directory and profile through it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from envperm.infrastructure.profile import home_dir
from envperm.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from envperm.config.settings import EnvPermSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class VariableService(BaseService):
            def set(self, name: str, value: object) -> ServiceResult:
                home = self._home()
                ...
    """

    def __init__(self, settings: EnvPermSettings | None = None) -> None:
        if settings is None:
            from envperm.config.settings import EnvPermSettings

            settings = EnvPermSettings.load()
        self._settings = settings

    @property
    def settings(self) -> EnvPermSettings:
        return self._settings

    def _home(self) -> Path:
        """Resolve the home directory. Raises HomeDirectoryError."""
        return home_dir(self._settings.home)

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
