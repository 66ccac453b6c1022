"""Shared pytest configuration for the bstreelib test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests on large degenerate trees"
    )
