"""Mixins shared by ctrnn components."""

from ctrnn.mixins.resettable_mixin import ResettableMixin

__all__ = ["ResettableMixin"]
