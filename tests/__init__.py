"""Unit tests for the translation chat services.

This package contains test modules for the configuration loader, the translation engine and
its providers, the cache, storage, and the chat delivery pipeline.
Tests use pytest with asyncio support and replace HTTP calls with in-process fakes.
"""
