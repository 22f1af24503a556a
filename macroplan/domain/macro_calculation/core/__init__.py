"""Core model of the macro calculation domain."""
