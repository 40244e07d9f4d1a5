from stringlift.exceptions import ConfigError

# Mapping of file extensions to language names used in this module
SUPPORTED_LANGUAGES = {
    ".py": "python",
    ".pyw": "python",
}

# Module-level statements that count as import directives
IMPORT_NODE_TYPES = {
    "import_statement": "import",
    "import_from_statement": "from_import",
    "future_import_statement": "future_import",
}

# Node types that carry literal text
STRING_NODE_TYPES = ("string", "concatenated_string")


def validate_extension(extension: str) -> str:
    """
    Validate a file extension and return its language.

    Args:
        extension: File extension (e.g., '.py')

    Returns:
        The language name for the extension.

    Raises:
        ConfigError: If the extension is not supported.
    """
    if extension not in SUPPORTED_LANGUAGES:
        supported = ", ".join(SUPPORTED_LANGUAGES.keys())
        raise ConfigError(
            f"File extension '{extension}' is not supported. Supported extensions: {supported}"
        )

    return SUPPORTED_LANGUAGES[extension]
