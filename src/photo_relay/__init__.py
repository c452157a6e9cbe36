"""Photo capture relay for smart-glasses sessions."""
