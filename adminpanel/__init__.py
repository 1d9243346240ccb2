"""Admin panel generation with optimistic lock protection for edit forms."""

__version__ = "0.1.0"
