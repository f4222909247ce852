from .legacy_fixer import PostElementFixer, post_element_fixer

__all__ = ["PostElementFixer", "post_element_fixer"]
