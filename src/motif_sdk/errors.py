from __future__ import annotations


class MotifSdkError(Exception):
    """Base class for all SDK errors."""


class InvalidNumberError(MotifSdkError, ValueError):
    """Raised when a decimal input is negative, non-finite, or otherwise unrepresentable."""


class BidShareSumInvalidError(MotifSdkError, ValueError):
    """
    Raised when creator, owner and previous-owner shares do not sum to exactly 100%.

    Both sums are scaled integers (10**18 per percent point).
    """

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"The BidShares sum to {actual}, but they must sum to {expected}"
        )


class InvalidAddressError(MotifSdkError, ValueError):
    """Raised when a string is not a valid EVM account address."""


class InsecureUriError(MotifSdkError, ValueError):
    """Raised when a URI does not begin with `https://`."""


class InvalidHashLengthError(MotifSdkError, ValueError):
    """Raised when a declared hash is not exactly 32 bytes."""


class FetchError(MotifSdkError, RuntimeError):
    """
    Raised when content cannot be fetched for verification.

    Covers transport errors, non-2xx responses and the explicit timeout. This is
    distinct from a hash mismatch, which is reported as a `False` verification result.
    """

    def __init__(
        self, uri: str, reason: str, *, status_code: int | None = None
    ) -> None:
        self.uri = uri
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {uri}: {reason}")


class UnsupportedVersionError(MotifSdkError, ValueError):
    """Raised when a metadata version string is not recognised by the schema registry."""


class MetadataSchemaError(MotifSdkError, ValueError):
    """Raised when a metadata document does not conform to its versioned JSON schema."""


class ReadOnlyError(MotifSdkError, RuntimeError):
    """Raised when a write is attempted on a wrapper constructed without an account."""


class UnsupportedChainError(MotifSdkError, LookupError):
    """Raised when a chain id has no known Motif network."""


class AddressResolutionError(MotifSdkError, LookupError):
    """Raised when a contract address cannot be resolved from inputs or deployments."""
