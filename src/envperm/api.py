"""Module-level convenience API.

Each function builds a :class:`VariableService` from default settings
(``ENVPERM_*`` env vars and the user's config file) and returns its
:class:`ServiceResult`. Check ``result.ok`` rather than catching
exceptions; a broken config file is reported as ``INVALID_CONFIG``::

    import envperm

    envperm.check_or_set("DUMMY", 1)                    # export DUMMY=1
    envperm.append("PATH", "$HOME/some/cool/bin")       # export PATH="$HOME/some/cool/bin:$PATH"
    envperm.append_to_end("PATH", "$HOME/cooler/bin")   # export PATH="$PATH:$HOME/cooler/bin"
    envperm.set("DUMMY", '"/something"')                # export DUMMY="/something"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError

from envperm.services.result import ServiceError, ServiceResult
from envperm.services.variables import VariableService

if TYPE_CHECKING:
    from envperm.config.settings import EnvPermSettings


def _service(settings: EnvPermSettings | None) -> VariableService | ServiceError:
    """Build the service, or the error describing why the config can't be loaded."""
    try:
        return VariableService(settings)
    except click.ClickException as exc:
        return ServiceError(code="INVALID_CONFIG", message=exc.format_message())
    except ValidationError as exc:
        return ServiceError(
            code="INVALID_CONFIG",
            message=f"Invalid envperm settings: {exc.error_count()} error(s)",
            detail={"errors": [err["msg"] for err in exc.errors()]},
        )


def _config_failure(op: str, error: ServiceError) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=error)


def set(name: str, value: Any, *, settings: EnvPermSettings | None = None) -> ServiceResult:  # noqa: A001
    """Append ``export NAME=VALUE`` to the profile unconditionally."""
    svc = _service(settings)
    if isinstance(svc, ServiceError):
        return _config_failure("set", svc)
    return svc.set(name, value)


def check_or_set(
    name: str, value: Any, *, settings: EnvPermSettings | None = None
) -> ServiceResult:
    """Set *name* in the profile unless it is already in the environment."""
    svc = _service(settings)
    if isinstance(svc, ServiceError):
        return _config_failure("check_or_set", svc)
    return svc.check_or_set(name, value)


def append(name: str, value: Any, *, settings: EnvPermSettings | None = None) -> ServiceResult:
    """Prepend *value* to *name*: ``export NAME="VALUE:$NAME"``."""
    svc = _service(settings)
    if isinstance(svc, ServiceError):
        return _config_failure("append", svc)
    return svc.append(name, value)


def append_to_end(
    name: str, value: Any, *, settings: EnvPermSettings | None = None
) -> ServiceResult:
    """Append *value* to *name*: ``export NAME="$NAME:VALUE"``."""
    svc = _service(settings)
    if isinstance(svc, ServiceError):
        return _config_failure("append_to_end", svc)
    return svc.append_to_end(name, value)


def find_profile(*, settings: EnvPermSettings | None = None) -> ServiceResult:
    """Report which profile file would receive writes."""
    svc = _service(settings)
    if isinstance(svc, ServiceError):
        return _config_failure("profile", svc)
    return svc.profile()
