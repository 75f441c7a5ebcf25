"""Library version and run-time version comparison."""

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 0

# The micro version is left out when it is zero.
VERSION = "2.14"

VERSION_HEX = (MAJOR_VERSION << 16) | (MINOR_VERSION << 8) | MICRO_VERSION


def version_str():
    """Return the library version as a string."""
    return VERSION


def version_cmp(major, minor, micro):
    """Compare the library version with the one given.

    The result is negative when the library is older, zero when equal and
    positive when the library is newer.
    """
    for ours, theirs in (
        (MAJOR_VERSION, major),
        (MINOR_VERSION, minor),
        (MICRO_VERSION, micro),
    ):
        if ours != theirs:
            return ours - theirs
    return 0