from .session import SESSION_DEFAULTS, init_state, reset_view_state, push_toast, pop_toasts

__all__ = ["SESSION_DEFAULTS", "init_state", "reset_view_state", "push_toast", "pop_toasts"]
