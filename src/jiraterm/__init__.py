"""Terminal issue tracker for epics and stories."""
