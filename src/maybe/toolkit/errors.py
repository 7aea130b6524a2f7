"""Error types returned by the toolkit wrappers."""

from __future__ import annotations

from typing import Any, Self

from maybe.errors import BaseError, FailureError, ValidationError

__all__ = ["CollectionError", "FileError", "JsonError", "ParseError"]


class FileError(FailureError):
    """A file could not be read or written."""

    __slots__ = ("_exception", "_path")

    DEFAULT_CODE = "File.IOError"
    DEFAULT_MESSAGE = "File operation failed."

    def __init__(
        self,
        exception: BaseException | None = None,
        path: str | None = None,
        message: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_exception", exception)
        object.__setattr__(self, "_path", path)
        super().__init__(message, context_data={"path": path}, cause=cause)

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @property
    def path(self) -> str | None:
        return self._path

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)


class JsonError(FailureError):
    """JSON text could not be decoded, or a value could not be encoded."""

    __slots__ = ("_exception",)

    DEFAULT_CODE = "Json.SerializationError"
    DEFAULT_MESSAGE = "JSON operation failed."

    def __init__(
        self,
        exception: BaseException | None = None,
        message: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_exception", exception)
        super().__init__(message, cause=cause)

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)


class ParseError(ValidationError):
    """A string could not be parsed into ``target_type``."""

    __slots__ = ("_exception", "_input_value", "_target_type")

    DEFAULT_CODE = "Parse.FormatError"
    DEFAULT_MESSAGE = "Parsing operation failed."

    def __init__(
        self,
        input_value: str | None = None,
        target_type: type[Any] | None = None,
        exception: BaseException | None = None,
        message: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_input_value", input_value)
        object.__setattr__(self, "_target_type", target_type)
        object.__setattr__(self, "_exception", exception)
        super().__init__(message=message, cause=cause)

    @property
    def input_value(self) -> str | None:
        return self._input_value

    @property
    def target_type(self) -> type[Any] | None:
        return self._target_type

    @property
    def exception(self) -> BaseException | None:
        return self._exception


class CollectionError(FailureError):
    """A key, index or element was not available in a collection."""

    __slots__ = ("_exception", "_key")

    DEFAULT_CODE = "Collection.AccessError"
    DEFAULT_MESSAGE = "Collection access failed."

    def __init__(
        self,
        key: Any = None,
        exception: BaseException | None = None,
        message: str | None = None,
        cause: BaseError | None = None,
    ) -> None:
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_exception", exception)
        super().__init__(message, cause=cause)

    @property
    def key(self) -> Any:
        return self._key

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @classmethod
    def from_error(cls, source: BaseError) -> Self:
        return cls(message=source.message, cause=source)
