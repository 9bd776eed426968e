"""Calculator version, stamped on every batch result."""

VERSION = "2025.12.1"
