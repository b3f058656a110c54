"""gitnotify command-line interface."""
