from imglift_upload.clients.upload_client import UploadClient, sanitize_log

__all__ = ["UploadClient", "sanitize_log"]
