"""Core option declaration and lookup machinery."""
