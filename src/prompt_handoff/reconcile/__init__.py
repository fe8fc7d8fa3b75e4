"""Reconciliation of edited text back into a host line buffer."""

from .planner import EditTransaction, plan_edit, reconcile

__all__ = ["EditTransaction", "plan_edit", "reconcile"]
