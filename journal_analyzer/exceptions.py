# journal_analyzer/exceptions.py
"""
Exceptions shared across the whole project.

- ConfigError           : environment / .env problems
- CatalogLoadError      : category catalog YAML could not be read
- InvalidInput          : request / input validation failure
- CategoryNotFoundError : unknown category id
- CategoryConflictError : duplicate category name
- AnalysisError         : unexpected failure while analysing an entry
"""


class ConfigError(RuntimeError):
    """Environment configuration (.env, API_TOKENS, ...) problem."""
    pass


class CatalogLoadError(IOError):
    """Category catalog file could not be loaded."""
    pass


class InvalidInput(ValueError):
    """Content, category name, colour or date range failed validation."""
    pass


class CategoryNotFoundError(LookupError):
    """No category exists with the requested id."""
    pass


class CategoryConflictError(ValueError):
    """A category with the same name already exists."""
    pass


class AnalysisError(RuntimeError):
    """Analysis pipeline failed for a reason other than bad input."""
    pass
