from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from . import codes

logger = logging.getLogger(__name__)

Errors = Union[List[Any], Dict[Any, Any]]


def _is_collection(value: Any) -> bool:
    # str/bytes are scalars here
    return isinstance(value, (Mapping, list, tuple))


def _copy_errors(errors: Any) -> Errors:
    if isinstance(errors, Mapping):
        return dict(errors)
    return list(errors)


def _as_mapping(errors: Any) -> Dict[Any, Any]:
    if isinstance(errors, Mapping):
        return dict(errors)
    return dict(enumerate(errors))


def _next_index(errors: Dict[Any, Any]) -> int:
    """
    Next free integer key of a keyed errors collection: one past the largest
    integer key, or 0 when there is none.
    """
    indexes = [k for k in errors if isinstance(k, int) and not isinstance(k, bool)]
    return max(indexes) + 1 if indexes else 0


def _union(existing: Errors, incoming: Any) -> Errors:
    """
    Merge `incoming` into `existing` without overwriting anything already
    present. Lists are keyed by position, mappings by key.
    """
    if not incoming:
        return existing

    if isinstance(existing, list) and not isinstance(incoming, Mapping):
        existing.extend(list(incoming)[len(existing):])
        return existing

    merged = existing if isinstance(existing, dict) else _as_mapping(existing)
    for key, value in _as_mapping(incoming).items():
        if key not in merged:
            merged[key] = value

    # a list stays a list while its keys are still 0..n-1
    if isinstance(existing, list) and list(merged) == list(range(len(merged))):
        return list(merged.values())
    return merged


class Result:
    """
    Outcome of an operation, returned instead of raising for expected
    failures.

    Build one with `Result.success(...)` or `Result.fail(...)` and keep
    adjusting it through the chainable setters:

        Result.fail(Result.VALIDATION).set_message("Invalid input").add_error({"email": "required"})

    The success flag is fixed at construction. Everything else is plain data.
    """

    SUCCESS = codes.SUCCESS
    FAIL = codes.FAIL

    CREATED = codes.CREATED
    UPDATED = codes.UPDATED
    SAVED = codes.SAVED
    DELETED = codes.DELETED
    VALIDATION = codes.VALIDATION
    AUTH = codes.AUTH
    NOT_AUTH = codes.NOT_AUTH
    FOUND = codes.FOUND
    NOT_FOUND = codes.NOT_FOUND
    ERROR = codes.ERROR
    FAILED = codes.FAILED
    PROCESSING = codes.PROCESSING

    def __init__(self, success: bool) -> None:
        self._success = bool(success)
        self._code = ""
        self._message = ""
        self._errors: Errors = []
        self._extras: Dict[str, Any] = {}
        self._exception: Optional[BaseException] = None

    # ------------- factories -------------

    @classmethod
    def success(
        cls,
        code: str = "",
        message: str = "",
        errors: Optional[Errors] = None,
        extras: Optional[Dict[str, Any]] = None,
    ) -> "Result":
        return cls._load(cls.SUCCESS, code, message, errors, extras, None)

    @classmethod
    def fail(
        cls,
        code: str = "",
        message: str = "",
        errors: Optional[Errors] = None,
        extras: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> "Result":
        result = cls._load(cls.FAIL, code, message, errors, extras, cause)
        if cause is not None:
            logger.debug(
                "Fail result captured %s (code=%r)", type(cause).__name__, code
            )
        return result

    @classmethod
    def _load(
        cls,
        status: bool,
        code: str,
        message: str,
        errors: Optional[Errors],
        extras: Optional[Dict[str, Any]],
        cause: Optional[BaseException],
    ) -> "Result":
        """
        Build the instance and apply only the arguments that carry something.
        Blank codes/messages and empty collections leave the defaults alone.
        """
        result = cls(status)

        if code:
            result.set_code(code)

        if message:
            result.set_message(message)

        if errors:
            result.set_errors(errors)

        if extras:
            result.set_extras(extras)

        if cause is not None:
            result.set_exception(cause)

        return result

    # ------------- status -------------

    def is_success(self) -> bool:
        return self._success is self.SUCCESS

    def is_fail(self) -> bool:
        return self._success is self.FAIL

    # ------------- code / message -------------

    def set_code(self, code: str) -> "Result":
        self._code = code
        return self

    def get_code(self) -> str:
        return self._code

    def set_message(self, message: str) -> "Result":
        """Set a more elaborate, human readable message."""
        self._message = message
        return self

    def get_message(self) -> str:
        return self._message

    # ------------- errors -------------

    def get_errors(self) -> Errors:
        return self._errors

    def set_errors(self, errors: Errors) -> "Result":
        """Replace the whole errors collection; nothing is merged."""
        self._errors = _copy_errors(errors)
        return self

    def add_error(self, error: Any) -> "Result":
        """
        Add to the errors collection.

        A list/tuple or mapping is merged in, keeping whatever is already
        stored under a key (or list position) and only adding the new ones.
        A list only turns into a dict when a mapping adds keys other than the
        next positions. Anything else is appended as one more error: to the end of a list, or
        under the next integer key of a keyed collection.
        """
        if _is_collection(error):
            self._errors = _union(self._errors, error)
        elif isinstance(self._errors, Mapping):
            self._errors[_next_index(self._errors)] = error
        else:
            self._errors.append(error)

        return self

    # ------------- extras -------------

    def get_extras(self) -> Dict[str, Any]:
        return self._extras

    def get_extra(self, key: str) -> Any:
        """
        Return the extra stored under `key`, or False if there is none.

        A stored False looks the same as a missing key; use `has_extra` when
        the difference matters.
        """
        if key in self._extras:
            return self._extras[key]

        return False

    def has_extra(self, key: str) -> bool:
        return key in self._extras

    def set_extra(self, key: str, data: Any) -> "Result":
        self._extras[key] = data
        return self

    def set_extras(self, extras: Dict[str, Any]) -> "Result":
        self._extras = dict(extras)
        return self

    # ------------- cause -------------

    def get_exception(self) -> Optional[BaseException]:
        return self._exception

    def set_exception(self, cause: Optional[BaseException]) -> "Result":
        """Attach the underlying exception; None clears it."""
        self._exception = cause
        return self

    def __repr__(self) -> str:
        return (
            f"<Result success={self._success!r} code={self._code!r} "
            f"message={self._message!r} errors={self._errors!r}>"
        )
