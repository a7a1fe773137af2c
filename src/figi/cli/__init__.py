"""figi command line interface."""
