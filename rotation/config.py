"""Single boundary that turns CDK context values into planning inputs.

Nothing past this module reads context or the environment.
"""

import logging

from typing import Any, Callable, NamedTuple, Optional

from .domain import DomainSpec, bind_domain
from .errors import MissingRequiredInput, RoleInvariantViolation
from .roles import DEFAULT_ALIAS_SLOT

CTX_ALIAS_SLOT = "aliasSlot"
CTX_DESTROY = "destroy"
CTX_HOSTED_ZONE_ID = "hostedZoneId"
CTX_LOG_LEVEL = "logLevel"
CTX_PRIMARY_RECORD_NAME = "primaryRecordName"
CTX_ZONE_NAME = "zoneName"

REQUIRED_CONTEXT = (CTX_HOSTED_ZONE_ID, CTX_ZONE_NAME, CTX_PRIMARY_RECORD_NAME)

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

_TRUE_VALUES = ("1", "true", "yes", "on")
_VAL_LOG_LEVEL = "info"


class RotationInputs(NamedTuple):
    hosted_zone_id: str
    zone_name: str
    primary_record_name: str
    alias_slot: int = DEFAULT_ALIAS_SLOT
    destroy: bool = False
    log_level: str = _VAL_LOG_LEVEL

    def domain_binding(self) -> Optional[DomainSpec]:
        """Return the bound domain, or None when DNS steps must be skipped."""
        if not self.hosted_zone_id:
            return None

        return bind_domain(self.zone_name, self.primary_record_name)


def _as_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False

    return str(value).strip().lower() in _TRUE_VALUES


def _as_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _as_slot(value: Any) -> int:
    if value is None or value == "":
        return DEFAULT_ALIAS_SLOT

    try:
        return int(value)
    except (TypeError, ValueError):
        raise RoleInvariantViolation(
            f"Context '{CTX_ALIAS_SLOT}' must be a slot index, got '{value}'"
        ) from None


def _as_log_level(value: Any) -> str:
    level = _as_text(value).lower()
    if not level:
        return _VAL_LOG_LEVEL

    if level not in LOG_LEVELS:
        logging.warning(
            "Unknown log level '%s', using '%s' (expected one of %s)",
            level,
            _VAL_LOG_LEVEL,
            ", ".join(LOG_LEVELS),
        )
        return _VAL_LOG_LEVEL

    return level


def is_destroy(get_context: Callable[[str], Any]) -> bool:
    # The CDK CLI does not pass its verb to the app, so `cdk destroy`
    # needs `--context destroy=true` as well.
    return _as_flag(get_context(CTX_DESTROY))


def load_inputs(get_context: Callable[[str], Any]) -> RotationInputs:
    """Read and validate the rotation inputs.

    ``get_context`` is usually ``app.node.try_get_context``. Outside destroy
    mode, every key in REQUIRED_CONTEXT must be present and non-empty and
    ``aliasSlot`` must be an integer. Destroy mode validates nothing.
    """
    destroy = is_destroy(get_context)

    values = {key: _as_text(get_context(key)) for key in REQUIRED_CONTEXT}
    if destroy:
        logging.info("Destroy mode, skipping input validation")
        alias_slot = DEFAULT_ALIAS_SLOT
    else:
        missing = [key for key in REQUIRED_CONTEXT if not values[key]]
        if missing:
            raise MissingRequiredInput(missing)
        alias_slot = _as_slot(get_context(CTX_ALIAS_SLOT))

    return RotationInputs(
        hosted_zone_id=values[CTX_HOSTED_ZONE_ID],
        zone_name=values[CTX_ZONE_NAME],
        primary_record_name=values[CTX_PRIMARY_RECORD_NAME],
        alias_slot=alias_slot,
        destroy=destroy,
        log_level=_as_log_level(get_context(CTX_LOG_LEVEL)),
    )
