"""Custom Exceptions for the gcpsamples command-line tools."""

class GcpSamplesError(Exception):
    """Base class for exceptions in this package."""
    pass

class ConfigurationError(GcpSamplesError):
    """Exception raised for errors in configuration loading."""
    pass

class UsageError(GcpSamplesError):
    """Exception raised when a required argument or option combination is missing."""
    pass

class FileSystemError(GcpSamplesError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass
