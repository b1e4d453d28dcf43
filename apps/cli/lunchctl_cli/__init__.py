"""lunchctl command line interface."""
