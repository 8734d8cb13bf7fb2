"""
Core utilities shared across the task manager and the personal site.

This package hosts configuration helpers, the error hierarchy and the logging
setup. Routers, repositories and the store depend on these primitives instead
of reading os.environ or defining their own exceptions.
"""
