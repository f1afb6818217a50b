"""
Exceptions raised while building the test environment.

Everything here is fatal to environment construction: a suite cannot run
safely against a half-configured environment, so nothing is retried.
"""


class HarnessError(Exception):
    """Base exception for the environment bootstrap."""


class ConfigError(HarnessError):
    """Raised when AWS configuration or required settings cannot be resolved."""


class MissingEnvironmentVariable(ConfigError):
    """Raised when a required environment variable is unset."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"required environment variable {variable} is not set")


class QueueLookupError(HarnessError):
    """Raised when INTERRUPTION_QUEUE names a queue that cannot be resolved."""

    def __init__(self, queue_name: str, reason: str):
        self.queue_name = queue_name
        super().__init__(f"failed to resolve interruption queue {queue_name!r}: {reason}")


class DiscoveryError(HarnessError):
    """Raised when availability zones cannot be listed."""
