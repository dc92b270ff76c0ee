"""Exceptions raised by the translation core."""

from typing import List, Optional

from infrastructure.operations import OperationResult


class TranslationError(Exception):
    """Base class for translation resolution errors."""


class RegistryLoadError(TranslationError):
    """The language list could not be read from the hosted store."""

    def __init__(self, message: str, result: Optional[OperationResult] = None):
        super().__init__(message)
        self.result = result


class RemoteFetchError(TranslationError):
    """Remote translations could not be fetched after every retry.

    Attributes:
        namespaces: Namespaces the failed request asked for
        attempts: Number of attempts made
        last_result: OperationResult of the final attempt
    """

    def __init__(
        self,
        message: str,
        namespaces: Optional[List[str]] = None,
        attempts: int = 0,
        last_result: Optional[OperationResult] = None,
    ):
        super().__init__(message)
        self.namespaces = list(namespaces or [])
        self.attempts = attempts
        self.last_result = last_result
