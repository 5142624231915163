"""Shared pytest configuration."""

from __future__ import annotations


def pytest_configure(config):
    config.addinivalue_line("markers", "smoke: fast unit checks")
    config.addinivalue_line("markers", "integration: end-to-end pipeline and CLI runs")
