"""Secret handling for logs and error messages."""

from tripclient.security.redact import redact_sensitive

__all__ = ["redact_sensitive"]
