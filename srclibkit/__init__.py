"""
srclibkit - toolchain registry for the srclib source analysis tool.

Toolchains are found through :mod:`srclibkit.toolchain`; repository context
detection lives in :mod:`srclibkit.repo`.
"""
