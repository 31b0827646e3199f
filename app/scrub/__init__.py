"""scrub - prune sidecar files and the empty directories they leave behind."""

__version__ = "0.1.0"
