"""Engine version, stamped on CLI summaries."""

VERSION = "2025.11.0"
