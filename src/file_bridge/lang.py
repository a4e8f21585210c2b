"""Language selection and bilingual text.

Every page is served in one of the configured languages, chosen from
the reserved ``lang`` query key:

- a supported value selects itself,
- no value selects the primary language,
- any other value selects the fallback language.
"""

from collections.abc import Sequence
from dataclasses import dataclass

PRIMARY = "cn"
FALLBACK = "en"
SUPPORTED: tuple[str, ...] = (PRIMARY, FALLBACK)

# Value for the <html lang> attribute
HTML_LANG = {"cn": "zh", "en": "en"}


def select_language(
    value: str | None,
    *,
    supported: Sequence[str] = SUPPORTED,
    default: str = PRIMARY,
    fallback: str = FALLBACK,
) -> str:
    """Resolve the requested language. Never fails."""
    if value is None:
        return default
    if value in supported:
        return value
    return fallback


@dataclass(frozen=True, slots=True)
class Text:
    """A pair of translations, picked by language key."""

    cn: str
    en: str

    def __call__(self, lang: str) -> str:
        if lang == "cn":
            return self.cn
        return self.en
