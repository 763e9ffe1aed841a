"""
buildopts - Build Option Details Registry

A read-only lookup surface over parsed build options. Option groups declare
their options in explicit tables; the registry merges the parsed groups into a
single name-addressable namespace and keeps externally-resolved settings,
addressed by label, alongside it.

Package Structure:
- core/options/: option declarations, converters and a command-line adapter
- core/details/: descriptors, name index, external settings and the registry
- core/utils/: logging and configuration
- cli/: developer command for inspecting a registry
"""

__version__ = "0.3"
