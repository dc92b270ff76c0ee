from fastapi import HTTPException

from infrastructure.operations import OperationResult, OperationStatus

_STATUS_CODES = {
    OperationStatus.NOT_FOUND: 404,
    OperationStatus.PERMANENT_ERROR: 400,
    OperationStatus.UNAUTHORIZED: 502,
    OperationStatus.TRANSIENT_ERROR: 503,
}


def raise_for_result(result: OperationResult) -> None:
    """Translate a failed OperationResult into an HTTPException."""
    if result.is_success:
        return
    raise HTTPException(
        status_code=_STATUS_CODES.get(result.status, 500),
        detail={"message": result.message, "error_code": result.error_code},
    )
