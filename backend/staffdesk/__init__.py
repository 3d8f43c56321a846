"""Employee-records backend for the admin dashboard."""

__version__ = "0.1.0"
