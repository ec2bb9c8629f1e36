"""Exporter models.

Defines the translation tree type and the export unit handed to exporters.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

TranslationKey = Union[int, str]

TranslationTree = Union[
    str, int, float, bool, None, Mapping[TranslationKey, Any]
]


@dataclass(frozen=True)
class ExportContent:
    """One locale/domain unit to export.

    Only the translations are read by exporters; the destination file and
    locale are carried for the host and for log context.

    Attributes:
        translations: Translation tree to render.
        destination_file: Path the host will write the rendered text to.
        locale: Locale identifier of the translations (e.g., "en").
    """

    translations: Mapping[TranslationKey, TranslationTree] = field(
        default_factory=dict
    )
    destination_file: str = ""
    locale: Optional[str] = None

    def get_translations(self) -> Mapping[TranslationKey, TranslationTree]:
        return self.translations

    def get_destination_file(self) -> str:
        return self.destination_file

    def get_locale(self) -> Optional[str]:
        return self.locale
