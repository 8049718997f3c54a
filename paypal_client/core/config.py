from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paypal_client.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_MS,
    base_url_for_environment,
)
from paypal_client.contracts.enums import Environment
from paypal_client.core.errors import PayPalInvalidRequestError


class PayPalConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: str = Field(min_length=1)
    client_secret: SecretStr
    environment: Environment
    timeout_ms: int | None = Field(default=None, gt=0)
    max_retries: int | None = Field(default=None, ge=0)
    webhook_id: str | None = None

    @field_validator("client_secret")
    @classmethod
    def require_secret(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value():
            raise ValueError("client_secret must not be empty")
        return value

    @property
    def resolved_timeout_ms(self) -> int:
        return self.timeout_ms or DEFAULT_TIMEOUT_MS

    @property
    def resolved_max_retries(self) -> int:
        if self.max_retries is None:
            return DEFAULT_MAX_RETRIES
        return self.max_retries

    @property
    def base_url(self) -> str:
        return base_url_for_environment(self.environment)


ConfigInput = PayPalConfig | Mapping[str, Any] | None


class ConfigRegistry:
    """Holds base configuration layered beneath every client built from it.

    Lifecycle: ``set_defaults`` may be called any number of times and merges
    into what is already there; there is no reset. ``resolve`` reads the
    defaults at client construction, so defaults set afterwards only affect
    clients built later.
    """

    def __init__(self, **defaults: Any) -> None:
        self._defaults: dict[str, Any] = {}
        if defaults:
            self.set_defaults(**defaults)

    def set_defaults(self, **values: Any) -> None:
        unknown = sorted(set(values) - set(PayPalConfig.model_fields))
        if unknown:
            raise PayPalInvalidRequestError(
                f"Unknown configuration option: {unknown[0]}", param=unknown[0]
            )
        self._defaults.update(_present(values))

    @property
    def defaults(self) -> dict[str, Any]:
        return dict(self._defaults)

    def resolve(self, config: ConfigInput = None, **overrides: Any) -> PayPalConfig:
        merged = dict(self._defaults)
        merged.update(_present(_as_options(config)))
        merged.update(_present(overrides))
        try:
            return PayPalConfig.model_validate(merged)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc


default_registry = ConfigRegistry()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PAYPAL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    client_id: str | None = None
    client_secret: SecretStr | None = None
    environment: str = Environment.SANDBOX.value
    timeout_ms: int | None = Field(default=None, gt=0)
    max_retries: int | None = Field(default=None, ge=0)
    webhook_id: str | None = None

    def client_options(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def _as_options(config: ConfigInput) -> dict[str, Any]:
    if config is None:
        return {}
    if isinstance(config, PayPalConfig):
        return config.model_dump()
    return dict(config)


def _present(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def _configuration_error(exc: ValidationError) -> PayPalInvalidRequestError:
    first = exc.errors()[0]
    param = ".".join(str(part) for part in first["loc"]) or None
    return PayPalInvalidRequestError(
        f"Invalid PayPal configuration for {param}: {first['msg']}", param=param
    )
