"""Terminal rendering of file listings: styled cells, tables, trees and timestamps."""

__version__ = "0.1.0"