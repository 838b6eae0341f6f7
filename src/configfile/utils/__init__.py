from .system import Platform

__all__ = ["Platform"]
