"""
Conventional status codes for a Result.

The vocabulary is open: callers may use any string as a code. These are
suggested names so the same outcome reads the same way across layers and
translations.
"""

SUCCESS = True
FAIL = False

CREATED = "created"
UPDATED = "updated"
SAVED = "saved"
DELETED = "deleted"
VALIDATION = "validation"
AUTH = "authorised"
NOT_AUTH = "not_authorised"
FOUND = "found"
NOT_FOUND = "not_found"
ERROR = "error"
FAILED = "failed"
PROCESSING = "processing"

ALL_CODES = (
    CREATED,
    UPDATED,
    SAVED,
    DELETED,
    VALIDATION,
    AUTH,
    NOT_AUTH,
    FOUND,
    NOT_FOUND,
    ERROR,
    FAILED,
    PROCESSING,
)
