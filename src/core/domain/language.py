"""Language utilities for puzzelzoeker.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth without creating circular
imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    DUTCH = "nl"

    @classmethod
    def from_bool(cls, dutch: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.DUTCH if dutch else cls.ENGLISH

    def lookup_failed_message(self) -> str:
        """Generic message shown when a lookup fails (no internal detail)."""

        if self is Language.DUTCH:
            return "Zoeken is mislukt. Probeer het later opnieuw."
        return "The lookup failed. Please try again later."

    def no_results_message(self) -> str:
        if self is Language.DUTCH:
            return "Geen woorden gevonden."
        return "No words found."

    def invalid_query_message(self) -> str:
        if self is Language.DUTCH:
            return "Ongeldige zoekopdracht."
        return "Invalid query."
