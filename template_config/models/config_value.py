"""Config value model: records of config values used to render a template."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from template_config.models.base import Base, IntegerIDMixin


class ConfigValue(Base, IntegerIDMixin):
    """One concrete, typed configuration value for a template section.

    Deleting the owning section removes the row (``ON DELETE CASCADE``).
    The value type and default references carry no cascade rule, so their
    parents cannot be deleted while a row points at them.
    """

    __tablename__ = "config_values"
    __table_args__ = {"sqlite_autoincrement": True}

    section_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("config_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    cfg_key: Mapped[str] = mapped_column(Text, nullable=False)
    cfg_value: Mapped[str] = mapped_column(Text, nullable=False)
    value_type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("config_value_types.id"), nullable=False
    )
    default_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("config_defaults.id"), nullable=False
    )

    def __repr__(self) -> str:
        return f"<ConfigValue {self.id}: {self.cfg_key}={self.cfg_value!r}>"
