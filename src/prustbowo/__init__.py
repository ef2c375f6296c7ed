"""prustbowo — scaffold and manage Rust REST API projects."""

__version__ = "0.1.0"
