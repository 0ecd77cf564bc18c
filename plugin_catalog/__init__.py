"""
Plugin Catalog
Builds, serves and edits the component catalog of an AI assistant plugin bundle.
"""

__version__ = "0.1.0"
__package_name__ = "plugin-catalog"
