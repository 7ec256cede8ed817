import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Load environment variables from .env file if it exists
load_dotenv()

# DynamoDB hard limits per BatchWriteItem / BatchGetItem call
MAX_BATCH_WRITE_ITEMS = 25
MAX_BATCH_GET_KEYS = 100


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _build(cls, **kwargs):
    """Construct a config, reporting bad values as the library's ValidationError."""
    try:
        return cls(**kwargs)
    except PydanticValidationError as e:
        errors = {".".join(str(part) for part in err['loc']): err['msg'] for err in e.errors()}
        raise ValidationError(f"Invalid UtilsConfig: {errors}", errors, original_error=e) from e
    except ValueError as e:
        # Raised by the environment readers inside default factories
        raise ValidationError(f"Invalid UtilsConfig: {e}", original_error=e) from e


class UtilsConfig(BaseModel):
    """Configuration for pagination and batch helpers."""

    # Batch settings
    write_chunk_size: int = Field(
        default_factory=lambda: _env_int("DYNAMODB_UTILS_WRITE_CHUNK_SIZE", MAX_BATCH_WRITE_ITEMS),
        description="Items per BatchWriteItem call (DynamoDB allows at most 25)"
    )

    get_chunk_size: int = Field(
        default_factory=lambda: _env_int("DYNAMODB_UTILS_GET_CHUNK_SIZE", MAX_BATCH_GET_KEYS),
        description="Keys per BatchGetItem call (DynamoDB allows at most 100)"
    )

    # Pagination settings
    max_pages: int = Field(
        default_factory=lambda: _env_int("DYNAMODB_UTILS_MAX_PAGES", 10000),
        description="Maximum query/scan calls per invocation before giving up"
    )

    max_items: Optional[int] = Field(
        default_factory=lambda: _env_int("DYNAMODB_UTILS_MAX_ITEMS", None),
        description="Stop paginating once this many items are collected (None reads everything)"
    )

    # Unprocessed items retry settings
    max_unprocessed_retries: Optional[int] = Field(
        default_factory=lambda: _env_int("DYNAMODB_UTILS_MAX_RETRIES", None),
        description="Resubmissions allowed per chunk (None retries until the store accepts everything)"
    )

    retry_base_delay: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_UTILS_RETRY_BASE_DELAY", 0.0),
        description="Base delay in seconds before resubmitting unprocessed items (0 retries immediately)"
    )

    retry_max_delay: float = Field(
        default_factory=lambda: _env_float("DYNAMODB_UTILS_RETRY_MAX_DELAY", 20.0),
        description="Upper bound in seconds for the resubmission delay"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_UTILS_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for every underlying DynamoDB call"
    )

    @field_validator('write_chunk_size')
    @classmethod
    def validate_write_chunk_size(cls, v):
        """Validate batch write chunk size."""
        if not 1 <= v <= MAX_BATCH_WRITE_ITEMS:
            raise ValueError(f"write_chunk_size must be between 1 and {MAX_BATCH_WRITE_ITEMS}")
        return v

    @field_validator('get_chunk_size')
    @classmethod
    def validate_get_chunk_size(cls, v):
        """Validate batch get chunk size."""
        if not 1 <= v <= MAX_BATCH_GET_KEYS:
            raise ValueError(f"get_chunk_size must be between 1 and {MAX_BATCH_GET_KEYS}")
        return v

    @field_validator('max_pages')
    @classmethod
    def validate_max_pages(cls, v):
        if v < 1:
            raise ValueError("max_pages must be at least 1")
        return v

    @field_validator('max_items')
    @classmethod
    def validate_max_items(cls, v):
        if v is not None and v < 1:
            raise ValueError("max_items must be at least 1 when set")
        return v

    @field_validator('max_unprocessed_retries')
    @classmethod
    def validate_max_unprocessed_retries(cls, v):
        if v is not None and v < 0:
            raise ValueError("max_unprocessed_retries cannot be negative")
        return v

    @field_validator('retry_base_delay', 'retry_max_delay')
    @classmethod
    def validate_delay(cls, v):
        """Validate retry delays."""
        if v < 0:
            raise ValueError("Retry delays cannot be negative")
        return v

    def retry_delay_policy(self):
        """Build the resubmission delay policy described by this config.

        Returns:
            ``no_delay`` when retry_base_delay is 0, otherwise an ExponentialBackoff
        """
        # Import here to avoid circular imports (config -> core -> config)
        from ..core.retry import ExponentialBackoff, no_delay

        if not self.retry_base_delay:
            return no_delay
        return ExponentialBackoff(base=self.retry_base_delay, cap=self.retry_max_delay)

    @classmethod
    def from_env(cls) -> 'UtilsConfig':
        """Create configuration from environment variables.

        Returns:
            UtilsConfig instance

        Raises:
            ValidationError: If an environment variable holds an invalid value
        """
        return _build(cls)

    @classmethod
    def for_bulk_loading(cls, **kwargs) -> 'UtilsConfig':
        """Create configuration for large batch loads against throttled tables.

        Backs off between resubmissions and gives up on a chunk after a bounded
        number of attempts instead of hammering the table.

        Args:
            **kwargs: Additional configuration parameters

        Returns:
            UtilsConfig instance tuned for bulk loading

        Raises:
            ValidationError: If a setting falls outside its allowed range
        """
        settings = {
            'retry_base_delay': 0.05,
            'retry_max_delay': 20.0,
            'max_unprocessed_retries': 10,
        }
        settings.update(kwargs)
        return _build(cls, **settings)

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True
    )


def configure_logging(config: Optional[UtilsConfig] = None) -> logging.Logger:
    """Apply the config's logging settings to the package logger.

    Args:
        config: Configuration to apply (environment defaults if None)

    Returns:
        The ``dynamodb_utils`` logger
    """
    config = config or UtilsConfig.from_env()
    package_logger = logging.getLogger("dynamodb_utils")
    package_logger.setLevel(logging.DEBUG if config.enable_debug_logging else logging.INFO)
    return package_logger
