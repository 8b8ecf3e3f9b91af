"""Configuration section model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from template_config.models.base import Base, IntegerIDMixin


class ConfigSection(Base, IntegerIDMixin):
    """A named grouping of configuration values for a template."""

    __tablename__ = "config_sections"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<ConfigSection {self.id}: {self.name}>"
