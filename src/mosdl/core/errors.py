"""
Error types for MOSDL specification loading, configuration and generation.
"""


class MosdlError(Exception):
    """Base exception for all MOSDL errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LoadError(MosdlError):
    """
    Raised when a specification document cannot be loaded.

    Examples:
    - File does not exist
    - Unsupported file format
    - Malformed JSON or YAML
    - Document does not match the specification model
    """

    pass


class ConfigError(MosdlError):
    """
    Raised when the generator configuration is invalid.

    Examples:
    - Malformed mosdl.toml
    - Unknown documentation type
    """

    pass


class GeneratorError(MosdlError):
    """
    Raised when a generator fails to produce output.

    Examples:
    - Output directory cannot be created
    - Output file cannot be written or closed
    - Unknown or duplicate generator name
    """

    pass
