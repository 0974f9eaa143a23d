"""Protocols shared between components."""

from .bloom import MembershipFilter

__all__ = ["MembershipFilter"]
