"""
Application-level exceptions.

- ConfigurationError: fatal to the run (no usable credentials, bad env values).
- CredentialDecodeError: one key entry is unusable; it is dropped and loading continues.
- SubmissionError: one submission attempt failed; retried, then reported per wallet.
- RpcError: JSON-RPC error object returned by the fullnode (a SubmissionError).
"""

from __future__ import annotations


class MintBatcherError(Exception):
    """Base class for all mint batcher errors."""


class ConfigurationError(MintBatcherError):
    """Configuration is unusable; the run stops before scheduling anything."""


class CredentialDecodeError(MintBatcherError):
    """A single credential entry could not be decoded into a signing key."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class SubmissionError(MintBatcherError):
    """A transaction submission attempt failed (network, RPC or on-chain)."""


class RpcError(SubmissionError):
    """Fullnode answered with a JSON-RPC error object."""

    def __init__(self, message: str, code: int | None = None, method: str | None = None):
        super().__init__(message)
        self.code = code
        self.method = method

    def __str__(self) -> str:
        base = super().__str__()
        if self.code is not None:
            return f"{base} (code={self.code})"
        return base
