"""Exception hierarchy raised by archive builds."""

from __future__ import annotations

import os


class ZipitError(Exception):
    """Base exception for archive build errors."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidInputError(ZipitError, TypeError):
    """Raised when an input is neither a path nor an inline-data descriptor."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"input must be a string or object, but got {value!r} ({type(value).__name__})",
            "INVALID_INPUT",
        )


class FilesystemError(ZipitError, OSError):
    """Raised when a stat, directory listing or file read fails.

    Still an ``OSError``: ``errno``, ``strerror`` and ``filename`` are copied
    from the original exception, which is kept on ``cause`` (and as
    ``__cause__`` when raised with ``from``).
    """

    def __init__(self, path: str | os.PathLike, cause: BaseException | None = None):
        self.path = os.fspath(path)
        self.cause = cause
        self.message = str(cause) if cause is not None else f"filesystem error at {self.path}"
        self.code = "FILESYSTEM_ERROR"

        errno = getattr(cause, "errno", None)
        if errno is not None:
            filename = getattr(cause, "filename", None)
            OSError.__init__(self, errno, cause.strerror, filename if filename is not None else self.path)
        else:
            OSError.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


class EncodingError(ZipitError):
    """Raised by the zip encoder when it cannot produce an archive."""

    def __init__(self, message: str):
        super().__init__(message, "ENCODING_ERROR")
