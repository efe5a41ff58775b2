"""Subpackages of the signer slot registry."""
