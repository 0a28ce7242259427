from .config import LANGUAGE_CONFIG, rust_selectors

__all__ = ['LANGUAGE_CONFIG', 'rust_selectors']
