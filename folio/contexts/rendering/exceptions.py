"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Iterable, Optional


class MetricsProviderError(RuntimeError):
    """
    Exception raised when the metrics backend can't measure or draw text.

    Fatal for a render: without widths nothing can be wrapped, so the error
    propagates and no output is written.

    Attributes:
        message: Error description
        font_name: Backend font that failed (if known)
        text_sample: The text being measured or drawn (if any)
        original_error: The backend's own exception
    """

    def __init__(
        self,
        message: str,
        font_name: Optional[str] = None,
        text_sample: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.font_name = font_name
        self.text_sample = text_sample
        self.original_error = original_error

        parts = [message]

        if font_name:
            parts.append(f"Font: {font_name}")

        if text_sample:
            sample = text_sample[:60] + "..." if len(text_sample) > 60 else text_sample
            parts.append(f"Text: {sample!r}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class UnknownSkinError(ValueError):
    """Exception raised when a skin key isn't defined in the skins config."""

    def __init__(self, skin_key: str, available: Iterable[str]):
        self.skin_key = skin_key
        self.available = list(available)
        super().__init__(f"Skin '{skin_key}' not found. Available skins: {self.available}")


class SkinConfigError(ValueError):
    """
    Exception raised when the skins YAML is missing required fields or has bad values.

    Attributes:
        message: Error description
        config_path: Path of the skins file being loaded
        skin_key: Skin whose entry is invalid (if known)
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        skin_key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.skin_key = skin_key

        parts = [message]
        if skin_key:
            parts.append(f"Skin: {skin_key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
