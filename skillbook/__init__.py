"""skillbook: load Markdown skills and match them to free text."""
