"""Command line interface for the mood tracker."""
