"""Exceptions raised by the admin panel."""


class AdminPanelError(Exception):
    """Base exception for admin panel errors."""


class ModelManagerError(AdminPanelError):
    """A persistence operation failed in the model manager."""


class AdminNotFoundError(AdminPanelError):
    """No admin is registered under the requested code."""
