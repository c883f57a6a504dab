"""Document subsystem exceptions."""


class DocumentError(Exception):
    """Base class for document loading errors."""


class DocumentNotFoundError(DocumentError):
    """Document path does not exist or is not a file."""


class DocumentDecodeError(DocumentError):
    """Document is not valid UTF-8 JSON."""
