"""Configuration models for Tasklist CLI.

Every section has defaults so a missing or partial config.json still
produces a complete configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Local key-value storage configuration."""

    key: str = Field(default="tasks", description="Storage key holding the task list")
    data_dir: str | None = Field(
        default=None, description="Storage directory (defaults to the user data dir)"
    )
    quota_bytes: int | None = Field(
        default=5 * 1024 * 1024, description="Maximum size of a stored value"
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys become file names, so they must be plain and non-empty."""
        v = v.strip()
        if not v:
            raise ValueError("key cannot be empty")
        if "/" in v or "\\" in v or v.startswith("."):
            raise ValueError(f"invalid storage key: {v!r}")
        return v


class ReminderConfig(BaseModel):
    """Reminder scheduling configuration."""

    enabled: bool = Field(default=True)
    lead_minutes: int = Field(default=15, ge=0)


class NotificationConfig(BaseModel):
    """Notification permission, mirroring the browser tri-state."""

    permission: Literal["default", "granted", "denied"] = Field(default="default")


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")


class AppConfig(BaseModel):
    """Main Tasklist configuration"""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    reminders: ReminderConfig = Field(default_factory=ReminderConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
