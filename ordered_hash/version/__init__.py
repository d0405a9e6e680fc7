"""
Provides the version of the ordered-hash distribution.
"""

# Pre-release versions use a negative last component. A version of
# (1, 1, 2 + BETA_VERSION_OFFSET) is rendered as "1.1b2" and still compares
# less than (1, 1, 0).
BETA_VERSION_OFFSET = -1000

#: Version (as a tuple).
VERSION = (1, 0, 0)


def _version_string():
    """
    Render `VERSION` as a string.
    """
    parts = []
    for component in VERSION:
        if component >= 0:
            parts.append(f".{component}")
        else:
            parts.append(f"b{component - BETA_VERSION_OFFSET}")
    return "".join(parts)[1:]


#: Version (as a string)
VERSION_STRING = _version_string()
