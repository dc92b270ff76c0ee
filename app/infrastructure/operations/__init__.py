"""Operation result types and status enums.

Standardized result types for remote data store calls, plus the error
classifier that maps httpx exceptions onto them.
"""

from infrastructure.operations.classifiers import classify_http_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_error",
]
