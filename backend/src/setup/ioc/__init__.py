"""Dependency injection setup."""

from src.setup.ioc.container import create_container

__all__ = ["create_container"]
