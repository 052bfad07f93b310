from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    gravity_min_ms: int = 100
    gravity_max_ms: int = 300
    think_delay_ms: int = 400
    cosmic_min: int = 1_000_000
    cosmic_max: int = 9_999_999
    clone_odds: int = 5
    cat_failure_odds: int = 10
    max_input_length: int = 64
    max_digits: int = 100
    animation_step_s: float = 0.15
    result_delay_s: float = 0.5
    seed: int | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PV_",
        env_file_encoding="utf-8",
    )

    @field_validator("port")
    @classmethod
    def port_in_range(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("gravity_min_ms", "gravity_max_ms", "think_delay_ms")
    @classmethod
    def delay_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("delays must not be negative")
        return v

    @field_validator("animation_step_s", "result_delay_s")
    @classmethod
    def animation_not_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("animation delays must not be negative")
        return v

    @field_validator("clone_odds", "cat_failure_odds", "max_input_length")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("max_digits")
    @classmethod
    def digits_in_range(cls, v: int) -> int:
        # str(int) refuses more than 4300 digits on current interpreters
        if not 1 <= v <= 4000:
            raise ValueError("max_digits must be between 1 and 4000")
        return v

    @model_validator(mode="after")
    def ranges_are_ordered(self) -> "Settings":
        if self.gravity_min_ms > self.gravity_max_ms:
            raise ValueError("gravity_min_ms must not exceed gravity_max_ms")
        if self.cosmic_min > self.cosmic_max:
            raise ValueError("cosmic_min must not exceed cosmic_max")
        return self

    @property
    def gravity_enabled(self) -> bool:
        return self.gravity_max_ms > 0
