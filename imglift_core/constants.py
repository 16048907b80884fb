"""Core Constants"""

IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".svg", ".tiff", ".webp"})

# Body template value replaced by the file payload
FILE_SENTINEL = "$FILE"

REMOTE_PREFIX = "http"

DEFAULT_UPLOAD_BODY = '{"image": "$FILE"}'
