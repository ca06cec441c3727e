"""Application services shared by user interfaces."""
