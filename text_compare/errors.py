class TextCompareError(Exception):
    """Base class for every error raised by text_compare."""


class DirectoryNotFoundError(TextCompareError):
    """A comparison directory is missing or cannot be listed."""

    def __init__(self, path, reason="directory not found"):
        self.path = path
        super().__init__(f"{reason}: {path}")


class FileAccessError(TextCompareError):
    """A file cannot be opened, decoded or written."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"cannot access {path}: {reason}")


class ConfigError(TextCompareError):
    pass


class TransportError(TextCompareError):
    pass
