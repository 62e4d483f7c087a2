"""
Failures of the external collaborators (OCR provider, VIN lookup).

Text that doesn't match an expected shape is never an error; the parsers
degrade to their defaults instead.
"""


class OcrError(Exception):
    """Base class for OCR collaborator failures"""


class OcrConfigurationError(OcrError):
    """No OCR credential configured"""


class OcrUpstreamError(OcrError):
    """OCR provider unreachable or returned a non-success status"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class VinLookupError(Exception):
    """VIN decoding service unreachable or returned a non-success status"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
