class TranslateJsonError(RuntimeError):
    """Base error for translate-json."""


class SourceDocumentError(TranslateJsonError):
    """Source localization file cannot be read, parsed, or is not an object."""


class ConfigError(TranslateJsonError):
    """Invalid value in the environment configuration."""
