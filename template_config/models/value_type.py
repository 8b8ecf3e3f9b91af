"""Configuration value type model."""

from enum import StrEnum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from template_config.models.base import Base, IntegerIDMixin


class ValueKind(StrEnum):
    """Value type names the renderer knows how to coerce."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


class ConfigValueType(Base, IntegerIDMixin):
    """Describes how the text of a config value is interpreted."""

    __tablename__ = "config_value_types"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<ConfigValueType {self.id}: {self.name}>"
