"""Service layer for recording and rendering config values."""

import logging
from typing import Any

from template_config.models.value_type import ValueKind
from template_config.repositories.exceptions import ConstraintViolation
from template_config.repositories.protocols import (
    ConfigValueRepositoryProtocol,
    DefaultRepositoryProtocol,
    SectionRepositoryProtocol,
    ValueTypeRepositoryProtocol,
)

logger = logging.getLogger(__name__)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}

_ALIASES = {
    "str": ValueKind.STRING,
    "text": ValueKind.STRING,
    "integer": ValueKind.INT,
    "number": ValueKind.FLOAT,
    "boolean": ValueKind.BOOL,
}


class ValueCoercionError(ValueError):
    """Raised when a stored value does not parse as its declared type."""

    def __init__(self, raw: str, type_name: str):
        self.raw = raw
        self.type_name = type_name
        super().__init__(f"Value {raw!r} is not a valid {type_name}")


def resolve_kind(type_name: str) -> ValueKind:
    """Map a value type name to the kind used for coercion; unknown names are text."""
    name = type_name.strip().lower()
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return ValueKind(name)
    except ValueError:
        return ValueKind.STRING


def coerce_value(raw: str, type_name: str) -> Any:
    """Interpret the stored text of a value according to its type name."""
    kind = resolve_kind(type_name)
    try:
        if kind is ValueKind.INT:
            return int(raw)
        if kind is ValueKind.FLOAT:
            return float(raw)
    except ValueError as exc:
        raise ValueCoercionError(raw, type_name) from exc

    if kind is ValueKind.BOOL:
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueCoercionError(raw, type_name)
    return raw


class ConfigValueService:
    """Business logic on top of the config value store."""

    def __init__(
        self,
        values: ConfigValueRepositoryProtocol,
        sections: SectionRepositoryProtocol,
        value_types: ValueTypeRepositoryProtocol,
        defaults: DefaultRepositoryProtocol,
    ):
        self._values = values
        self._sections = sections
        self._value_types = value_types
        self._defaults = defaults

    async def set_config_value(self, section: str, key: str, value: str, value_type: str) -> int:
        """Record a value by section name, key and value type name.

        The default is the one recorded for the same section and key.

        Raises:
            ConstraintViolation: If the section, value type or default cannot be
                resolved.
        """
        section_row = await self._sections.get_by_name(section)
        if section_row is None:
            raise ConstraintViolation("config_values", f"unknown section '{section}'")

        type_row = await self._value_types.get_by_name(value_type)
        if type_row is None:
            raise ConstraintViolation("config_values", f"unknown value type '{value_type}'")

        default_row = await self._defaults.find(section_row.id, key)
        if default_row is None:
            raise ConstraintViolation(
                "config_values", f"no default for key '{key}' in section '{section}'"
            )

        value_id = await self._values.create(
            section_id=section_row.id,
            cfg_key=key,
            cfg_value=value,
            value_type_id=type_row.id,
            default_id=default_row.id,
        )
        logger.info("Recorded config value id=%s section=%s key=%s", value_id, section, key)
        return value_id

    async def render_section(self, section_id: int) -> dict[str, Any] | None:
        """Build the typed key/value mapping for a section.

        Defaults come first and explicit values override them. When a key
        was recorded more than once the most recent value wins.
        """
        if await self._sections.get(section_id) is None:
            return None

        type_names = {t.id: t.name for t in await self._value_types.list_all()}

        rendered: dict[str, Any] = {}
        for default in await self._defaults.list_for_section(section_id):
            rendered.setdefault(
                default.cfg_key,
                coerce_value(default.cfg_value, type_names.get(default.value_type_id, "")),
            )
        # list_for_section is ordered by id, so later rows overwrite earlier ones
        for value in await self._values.list_for_section(section_id):
            rendered[value.cfg_key] = coerce_value(
                value.cfg_value, type_names.get(value.value_type_id, "")
            )
        return rendered
