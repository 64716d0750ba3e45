"""Configuration system for the Chapter 7 means test engine.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults.

Usage:
    from chapter7_core.config import EngineConfig

    # Load from environment variables and .env file
    config = EngineConfig()

    # Pick the IRS/Census table set and the Stage B policy
    print(config.standards_version)
    print(config.stage_b_policy)
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_STANDARDS_VERSION = "2025-11"


class StageBPolicy(str, Enum):
    """How an above-median household is decided.

    SIMPLIFIED compares disposable income against the presumption
    thresholds. DEFERRED reports the determination as pending until the
    full Form 122A-2 deduction schedule is computed elsewhere.
    """

    SIMPLIFIED = "simplified"
    DEFERRED = "deferred"


class EngineConfig(BaseSettings):
    """Root configuration for the means test engine.

    Environment Variables:
        CHAPTER7_ENV: Environment name (development, staging, production, test)
        CHAPTER7_STANDARDS_VERSION: Registered IRS/Census table set to use
        CHAPTER7_STAGE_B_POLICY: simplified or deferred
        CHAPTER7_RECORD_AUDIT_TRAIL: Attach the step-by-step audit trail to results

    Example:
        # Load all configuration from environment
        config = EngineConfig()

        # Override specific settings
        config = EngineConfig(stage_b_policy=StageBPolicy.DEFERRED)
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAPTER7_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production, test)",
    )
    standards_version: str = Field(
        default=DEFAULT_STANDARDS_VERSION,
        description="Version tag of the IRS/Census standards table set",
    )
    stage_b_policy: StageBPolicy = Field(
        default=StageBPolicy.SIMPLIFIED,
        description="Policy applied when income is above the state median",
    )
    record_audit_trail: bool = Field(
        default=True,
        description="Attach the calculation audit trail to each result",
    )

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("standards_version")
    @classmethod
    def validate_standards_version(cls, v: str) -> str:
        """Ensure the version tag is not empty."""
        if not v or not v.strip():
            raise ValueError("Standards version cannot be empty")
        return v.strip()
