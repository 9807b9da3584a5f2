"""Domain layer - library-defined failure types.

This package contains the error types raised by the client and is
independent of configuration and transport concerns.
"""
