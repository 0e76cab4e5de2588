"""Turn-based battle resolver and run progression for the minirpg mini-game."""
