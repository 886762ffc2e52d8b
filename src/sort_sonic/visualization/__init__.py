"""Terminal rendering and the visualization context threaded through sorts."""
