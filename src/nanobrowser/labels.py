"""
Display strings for the shell, keyed the way the views look them up.
"""

from __future__ import annotations

from typing import Dict, Mapping

from .errors import BrowserError

DEFAULT_LANGUAGE = "English"

LABEL_BUNDLES: Dict[str, Dict[str, str]] = {
    "English": {
        "BackCommand": "Back",
        "NextCommand": "Next",
        "HomeCommand": "Home",
        "GoCommand": "Go",
        "AddFavoriteCommand": "Add Favorite",
        "FavoriteFirstItem": "All Favorites",
        "SetHomeCommand": "Set Home",
        "FavoritePrompt": "Enter name",
        "FavoritePromptTitle": "Add Favorite",
        "ErrorTitle": "Browser Error",
        "LoadError": "Could not load {location}",
    },
    "Italiano": {
        "BackCommand": "Indietro",
        "NextCommand": "Avanti",
        "HomeCommand": "Home",
        "GoCommand": "Vai",
        "AddFavoriteCommand": "Aggiungi preferito",
        "FavoriteFirstItem": "Tutti i preferiti",
        "SetHomeCommand": "Imposta home",
        "FavoritePrompt": "Inserisci un nome",
        "FavoritePromptTitle": "Aggiungi preferito",
        "ErrorTitle": "Errore del browser",
        "LoadError": "Impossibile caricare {location}",
    },
}


class Labels(Mapping[str, str]):
    """Read-only key -> label table."""

    def __init__(self, language: str, table: Mapping[str, str]) -> None:
        self.language = language
        self._table = dict(table)

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __iter__(self):
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def format(self, key: str, **values: str) -> str:
        return self._table[key].format(**values)


def load_labels(
    language: str = DEFAULT_LANGUAGE,
    overrides: Mapping[str, str] | None = None,
) -> Labels:
    if language not in LABEL_BUNDLES:
        raise BrowserError(
            f"Unknown language `{language}`. "
            f"Available: {', '.join(sorted(LABEL_BUNDLES))}."
        )
    table = dict(LABEL_BUNDLES[language])
    if overrides:
        table.update(overrides)
    return Labels(language, table)
