"""Test fixtures for srclibkit tests.

- toolchains: Toolchain directories under temporary search path entries

Import fixtures in your tests using:
    from tests.fixtures.toolchains import make_toolchain
"""

__all__ = [
    "toolchains",
]
