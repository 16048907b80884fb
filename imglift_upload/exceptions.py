# Base Exception
class ImgliftError(Exception):
    # Base exception for image upload errors
    pass


# Upload Exceptions
class UploadError(ImgliftError):
    # Raised when the upload request fails or its response is unusable

    def __init__(self, message: str = "Upload failed", cause: str = ""):
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause else message)


class UploadTimeoutError(UploadError):
    # Raised when the upload request exceeds the configured timeout
    pass


# Asset Exceptions
class AssetReadError(ImgliftError):
    # Raised when a resolved asset cannot be read from disk

    def __init__(self, path: str, reason: str = "Read failed"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


# Input Exceptions
class InvalidInputError(ImgliftError):
    # Raised when a document or line range is invalid
    pass
