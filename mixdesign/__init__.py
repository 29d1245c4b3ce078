"""
Mix design package.

Keep this file side-effect free.
Do NOT import submodules here, otherwise importing any mixdesign.* module
pulls in the web and UI stacks and can cause import-order errors.
"""

__all__ = []
