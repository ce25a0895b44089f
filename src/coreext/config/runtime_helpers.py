"""Helpers for runtime configuration: dotenv parsing and list normalization."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Sequence

from .errors import ConfigurationError


class DotenvLoader:
    """Loads configuration from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of environment variables

        Raises:
            ConfigurationError: If file cannot be read
        """
        if not path.exists():
            return {}

        values: Dict[str, str] = {}
        try:
            for line in path.read_text().splitlines():
                stripped = line.strip()
                if DotenvLoader._should_skip_line(stripped):
                    continue

                key, value = DotenvLoader._parse_env_line(stripped)
                if key:
                    values[key] = value

        except OSError as exc:
            raise ConfigurationError.load_failed("configuration", str(path)) from exc

        return values

    @staticmethod
    def _should_skip_line(line: str) -> bool:
        return not line or line.startswith("#") or "=" not in line

    @staticmethod
    def _parse_env_line(line: str) -> tuple[str, str]:
        key, raw_value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export ") :].strip()
        value = raw_value.strip().strip("'").strip('"')
        return key, value


class ListNormalizer:
    """Normalizes delimited list values from environment variables."""

    @staticmethod
    def split_and_normalize(raw_value: str, separator: str, strip_items: bool) -> list[str]:
        """
        Split raw value by separator and normalize items.

        Args:
            raw_value: Raw string value
            separator: Delimiter (empty string means no splitting)
            strip_items: Whether to strip whitespace from items

        Returns:
            List of normalized string items, empty items removed
        """
        parts: Iterable[str] = raw_value.split(separator) if separator else [raw_value]
        if strip_items:
            parts = (part.strip() for part in parts)
        return [part for part in parts if part]

    @staticmethod
    def deduplicate_preserving_order(items: Sequence[str]) -> tuple[str, ...]:
        seen: set[str] = set()
        deduped: list[str] = []

        for item in items:
            if item not in seen:
                deduped.append(item)
                seen.add(item)

        return tuple(deduped)


__all__ = ["DotenvLoader", "ListNormalizer"]
