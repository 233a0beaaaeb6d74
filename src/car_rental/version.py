"""Version metadata for CarRental."""

__app_name__ = "CarRental"
__version__ = "0.1.0"
