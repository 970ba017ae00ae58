"""
flagenum Version Information

This file contains the single source of truth for the flagenum version number.
All version references throughout the codebase should import from this file.
"""

# Version number (semantic versioning)
__version__ = "1.0.1"

# Display name for logs and error reports
__version_display__ = f"v{__version__}"
