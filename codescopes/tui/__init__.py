from codescopes.tui.renderers import ScopesConsoleUI

__all__ = ["ScopesConsoleUI"]
