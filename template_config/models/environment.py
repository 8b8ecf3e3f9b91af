"""Deployment environment models."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from template_config.models.base import Base, IntegerIDMixin


class Environment(Base, IntegerIDMixin):
    """A named deployment target."""

    __tablename__ = "environments"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    namespace: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Environment {self.name} ({self.namespace})>"


class EnvironmentConfigValue(Base, IntegerIDMixin):
    """Binds a config value to an environment."""

    __tablename__ = "environments_config_values"
    __table_args__ = {"sqlite_autoincrement": True}

    environment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("environments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    config_value_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("config_values.id", ondelete="CASCADE"),
        nullable=False,
    )
