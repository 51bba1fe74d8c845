"""Localization port — product names and receipt wording pass through here."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class Localizer(ABC):
    @abstractmethod
    def localize(self, text: str) -> str: ...


class PassthroughLocalizer(Localizer):
    def localize(self, text: str) -> str:
        return text


class CatalogLocalizer(Localizer):
    """Looks text up in a fixed translation catalog, falling back to the source text."""

    def __init__(self, catalog: Mapping[str, str]) -> None:
        self.catalog = dict(catalog)

    def localize(self, text: str) -> str:
        return self.catalog.get(text, text)
