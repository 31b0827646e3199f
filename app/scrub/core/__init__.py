"""Core infrastructure for scrub: paths, configuration, theming and logging."""
