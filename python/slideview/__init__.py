"""Host frontends for the sliding puzzle core."""
