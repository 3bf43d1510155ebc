"""Notification adapters."""

from .branch_notifier import BranchNotifier

__all__ = ["BranchNotifier"]
