"""Configuration compilation: file formats into kernel config models."""
