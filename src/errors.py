"""Exception types raised while loading configuration and site content."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError


class FolioError(Exception):
    """Base class for all folio errors."""


class ContentLoadError(FolioError):
    """A content file is missing or is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load content from {path}: {reason}")


class ContentValidationError(FolioError):
    """Authored content does not match the entity shapes.

    Keeps the offending file and one ``(location, message)`` pair per
    pydantic error so the CLI can list every problem at once.
    """

    def __init__(self, path: Path | None, errors: list[tuple[str, str]]) -> None:
        self.path = path
        self.errors = errors
        source = str(path) if path is not None else "<content>"
        super().__init__(f"{len(errors)} content error(s) in {source}")

    @classmethod
    def from_pydantic(cls, path: Path | None, exc: ValidationError) -> ContentValidationError:
        return cls(path, _error_pairs(exc))


class ConfigError(FolioError):
    """Configuration from a file, the environment or CLI flags is invalid."""

    def __init__(self, errors: list[tuple[str, str]]) -> None:
        self.errors = errors
        details = "; ".join(f"{location}: {message}" for location, message in errors)
        super().__init__(f"Invalid configuration ({details})")

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> ConfigError:
        return cls(_error_pairs(exc))


class UnknownLocaleError(FolioError, KeyError):
    """No profile variant is registered for the requested locale."""

    def __init__(self, locale: str, available: list[str]) -> None:
        self.locale = locale
        self.available = available
        super().__init__(
            f"No profile for locale {locale!r} (available: {', '.join(available) or 'none'})"
        )

    def __str__(self) -> str:
        return self.args[0]


def _error_pairs(exc: ValidationError) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        pairs.append((location, err["msg"]))
    return pairs
