"""
Core Exceptions - Custom exception classes for AniProv.

This module defines the exception hierarchy shared by providers, the
configuration layer and the command line interface.
"""

from typing import Optional, Any


class AniProvError(Exception):
    """Base exception class for all AniProv-specific errors."""
    
    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize AniProv error.
        
        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details
    
    def __str__(self) -> str:
        return self.message


class ConfigurationError(AniProvError):
    """Raised when configuration files cannot be read, written or validated."""
    
    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize configuration error.
        
        Args:
            message: Error description
            config_path: Path to the problematic configuration file
            details: Additional error context
        """
        super().__init__(message, details)
        self.config_path = config_path


class ProviderError(AniProvError):
    """Raised when a provider cannot be loaded or cannot fulfil a request."""
    
    def __init__(self, message: str, provider_name: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize provider error.
        
        Args:
            message: Error description
            provider_name: Name of the problematic provider
            details: Additional error context
        """
        super().__init__(message, details)
        self.provider_name = provider_name


class NetworkError(AniProvError):
    """Raised when an HTTP request fails or returns an error status."""
    
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class ExtractionError(ProviderError):
    """Raised when a page was fetched but nothing usable could be extracted."""
    
    def __init__(self, message: str, provider_name: Optional[str] = None, url: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize extraction error.
        
        Args:
            message: Error description
            provider_name: Provider that attempted the extraction
            url: Page or player URL the extraction ran against
            details: Additional error context
        """
        super().__init__(message, provider_name, details)
        self.url = url


class ValidationError(AniProvError):
    """Raised when input data fails validation."""
    
    def __init__(self, message: str, field_name: Optional[str] = None, invalid_value: Optional[Any] = None, details: Optional[Any] = None):
        """
        Initialize validation error.
        
        Args:
            message: Error description
            field_name: Name of the field that failed validation
            invalid_value: The invalid value that caused the error
            details: Additional error context
        """
        super().__init__(message, details)
        self.field_name = field_name
        self.invalid_value = invalid_value


# Export all exception classes
__all__ = [
    "AniProvError",
    "ConfigurationError",
    "ProviderError",
    "NetworkError",
    "ExtractionError",
    "ValidationError",
]
