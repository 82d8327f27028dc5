"""cakecollate — field validation for the CakeCollate order tracker."""

__version__ = "0.1.0"
