"""Two-dimensional MHD and hydrodynamics solver based on the MacCormack scheme."""

__version__ = "0.1.0"
__all__ = ["__version__"]