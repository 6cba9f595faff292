"""Version information for apisurface."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the graph document format or report layout
# MINOR: New report kinds or options, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Inherited member walk and provenance annotations
#         - members report walks base types and interfaces (--declared-only keeps the old behaviour)
#         - cycle-safe walk with a visited set, unresolved ancestors skipped and counted
#         - YAML graph documents
# 0.1.0 - Initial release
#         - types, options and members reports over JSON graph documents
