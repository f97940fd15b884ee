"""Home module of enumeration types built from YAML definitions.

:func:`enumerations.config.loader.build_enumerations` binds each type it builds
here by name unless a caller passes its own ``module``. Binding the type makes
it importable by ``__module__`` and ``__qualname__``, which pickle relies on.
"""
