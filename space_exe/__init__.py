"""space.exe: a sprite that follows your cursor through space."""
