"""
Resettable State Mixin for ctrnn Components.

Provides a standard interface for resetting dynamic state while keeping
learned or configured parameters.
"""

from __future__ import annotations


class ResettableMixin:
    """Mixin for components with resettable state.

    Usage:
        class MyComponent(ResettableMixin):
            def reset_state(self) -> None:
                '''Reset internal state for a new episode.'''
                self.time = 0.0
    """

    def reset_state(self) -> None:
        """Reset dynamic state for a new episode.

        Resets oscillation phase, exploration amplitude or held voltages
        while preserving learned parameters (centers, weights).

        Note:
            Subclasses must override this method to reset their
            specific state variables.
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement reset_state()"
        )
