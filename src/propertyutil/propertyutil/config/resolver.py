# ABOUTME: Configuration for property bundle loading and the lookup cache
# ABOUTME: Controls cache capacity, caching default, file encoding, locale and default bundle

import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from propertyutil.config._base import ENV_PREFIX
from propertyutil.exceptions import ValidationException
from propertyutil.models import normalize_locale, validate_bundle_name


class ResolverSettings(BaseSettings):
    """Settings for bundle loading and property resolution.

    Attributes:
        CACHE_CAPACITY: Entries held by each resolver cache before it is flushed.
        USE_CACHE: Whether resolvers cache lookups unless told otherwise.
        FILE_ENCODING: Encoding of ``.properties`` files.
        LOCALE: Locale for bundle variants; None means the process locale.
        DEFAULT_BUNDLE_NAME: Bundle bound lazily by the process-wide holder.
        DEFAULT_SUBDIRECTORY: Subdirectory used with DEFAULT_BUNDLE_NAME.
    """

    CACHE_CAPACITY: int = Field(
        default=2048,
        ge=1,
        description="Maximum number of cached keys per resolver; the cache is cleared when exceeded.",
    )
    USE_CACHE: bool = Field(
        default=True,
        description="Default preference for caching resolved properties.",
    )
    FILE_ENCODING: str = Field(
        default="iso-8859-1",
        description="Character encoding of properties files.",
    )
    LOCALE: str | None = Field(
        default=None,
        description="Locale for bundle variants such as en_US. Defaults to the process locale.",
    )
    DEFAULT_BUNDLE_NAME: str | None = Field(
        default=None,
        description="Bundle name the process-wide holder binds to when used before bind().",
    )
    DEFAULT_SUBDIRECTORY: str = Field(
        default="",
        description="Subdirectory searched with DEFAULT_BUNDLE_NAME.",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("FILE_ENCODING", mode="before")
    @classmethod
    def validate_file_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codec registry."""
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file encoding '{v}'")
        return v

    @field_validator("LOCALE", mode="before")
    @classmethod
    def validate_locale(cls, v: str | None) -> str | None:
        """Normalize en-us, en_US.UTF-8 and similar spellings to en_US.

        ``C`` and ``POSIX`` are kept as ``C``, meaning "no locale variants";
        an empty value means "use the process locale".
        """
        if isinstance(v, str):
            if not v.strip():
                return None
            return normalize_locale(v) or "C"
        return v

    @field_validator("DEFAULT_BUNDLE_NAME", mode="before")
    @classmethod
    def validate_default_bundle_name(cls, v: str | None) -> str | None:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            return validate_bundle_name(v)
        except ValidationException as e:
            raise ValueError(e.message)
