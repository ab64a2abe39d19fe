"""Version information for mdtoc.

The version is statically defined here and should match pyproject.toml.
"""

import markdown_it
import mdit_py_plugins

__version__ = "0.5.0"


def get_full_version_string() -> str:
    """Get a version string that includes the markdown pipeline it runs on.

    Returns:
        String like "mdtoc 0.5.0 (markdown-it-py 3.0.0, mdit-py-plugins 0.4.2)"
    """
    return (
        f"mdtoc {__version__} "
        f"(markdown-it-py {markdown_it.__version__}, mdit-py-plugins {mdit_py_plugins.__version__})"
    )
