"""Shared (non-domain) exceptions."""


class StorageError(Exception):
    """Backing store failed in a way validation could not anticipate."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"[{operation}] {message}")


class ConfigurationError(Exception):
    """Runtime configuration is invalid."""

    def __init__(self, name: str, value: str):
        self.setting_name = name
        super().__init__(f"Invalid value for {name}: {value!r}")
