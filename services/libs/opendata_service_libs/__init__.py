"""Shared service libraries for the Open Data gateway: logging, errors, envelope."""
