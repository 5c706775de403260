from .apply import apply_replacement, replacement_lines

__all__ = ["apply_replacement", "replacement_lines"]
