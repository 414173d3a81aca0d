"""A small interactive shell with echo, cd, pwd, env, export, unset and exit builtins."""

__version__ = "0.1.0"
__all__ = ["__version__"]