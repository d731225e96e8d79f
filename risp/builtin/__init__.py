from risp.builtin.env_builtin import register, is_equal

__all__ = ["register", "is_equal"]
