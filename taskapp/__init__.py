"""Task manager and personal site web applications."""
