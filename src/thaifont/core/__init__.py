"""Core building blocks shared across thaifont: configuration, diagnostics, errors."""
