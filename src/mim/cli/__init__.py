"""Terminal front end for the editor."""
