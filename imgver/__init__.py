"""Container image version discovery for build matrices."""

__version__ = "0.1.0"
