"""solchess — capture-only chess puzzle solver and generator."""
