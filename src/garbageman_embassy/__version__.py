"""Version information for garbageman-embassy."""

__version__ = "0.1.0"

# Version of the service package as recorded by the host; migrations target it
__package_version__ = "0.1.0.1"
