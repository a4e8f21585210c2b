"""Settings for one bridge process.

Everything has a default; the CLI overrides host, port, debug and log
level. ``validate()`` runs when the app freezes.
"""

from dataclasses import dataclass

from file_bridge.errors import ConfigurationError
from file_bridge.http.request import DEFAULT_BODY_TIMEOUT, DEFAULT_MAX_BODY_SIZE
from file_bridge.lang import FALLBACK, PRIMARY, SUPPORTED


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Frozen bridge settings::

        config = AppConfig(port=8080, default_lang="en")
    """

    host: str = "127.0.0.1"
    port: int = 6666
    debug: bool = False
    log_level: str = "info"

    # Watched for code changes when debug=True
    reload_dirs: tuple[str, ...] = ()

    # Page language: read from the lang_key query parameter
    lang_key: str = "lang"
    languages: tuple[str, ...] = SUPPORTED
    default_lang: str = PRIMARY
    fallback_lang: str = FALLBACK

    # Request bodies larger or slower than this are refused (413 / 408)
    max_body_size: int = DEFAULT_MAX_BODY_SIZE
    body_timeout: float | None = DEFAULT_BODY_TIMEOUT

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for settings that cannot work together."""
        problems = [
            f"{label}={value!r} is not one of languages={self.languages!r}"
            for label, value in (
                ("default_lang", self.default_lang),
                ("fallback_lang", self.fallback_lang),
            )
            if value not in self.languages
        ]
        if self.max_body_size <= 0:
            problems.append(f"max_body_size must be positive, got {self.max_body_size}")
        if self.body_timeout is not None and self.body_timeout <= 0:
            problems.append(f"body_timeout must be positive or None, got {self.body_timeout}")
        if problems:
            raise ConfigurationError("; ".join(problems))
