"""IPMA weather dashboard: nearest-station weather reports for Portugal."""
