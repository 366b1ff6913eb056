"""file_manager package: interactive command-line file manager.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
