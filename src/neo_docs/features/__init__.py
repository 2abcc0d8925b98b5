"""Feature packages of neo-docs."""
