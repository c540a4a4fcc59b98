"""
Core cross-cutting pieces: the error taxonomy shared by every component.
"""

from mint_batcher.core.exceptions import (
    ConfigurationError,
    CredentialDecodeError,
    MintBatcherError,
    RpcError,
    SubmissionError,
)

__all__ = [
    "ConfigurationError",
    "CredentialDecodeError",
    "MintBatcherError",
    "RpcError",
    "SubmissionError",
]
